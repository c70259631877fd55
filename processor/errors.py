"""Exceptions raised while converting a frab schedule."""


class ConversionError(Exception):
    """Base class for every failure that aborts a conversion run."""


class NetworkFailure(ConversionError):
    """A source document could not be fetched."""


class MalformedSourceDocument(ConversionError):
    """A source document does not match the expected frab schema."""


class MalformedTimestamp(ConversionError):
    """An event date is not in YYYY-MM-DDThh:mm:ss+hh:mm form."""


class MalformedDuration(ConversionError):
    """An event duration is not an H:MM string."""


class SerializationError(ConversionError):
    """An output collection could not be serialized to JSON."""


class FilesystemError(ConversionError):
    """The output directory or an output file could not be written."""
