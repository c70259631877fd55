"""Parse frab schedule.json and speakers.json documents."""
import json
import logging
from typing import Any, Dict, List, Union

from processor.errors import MalformedSourceDocument
from processor.models import (
    FrabConference,
    FrabDay,
    FrabEvent,
    FrabLink,
    FrabPerson,
    FrabSchedule,
    FrabSpeaker,
)

logger = logging.getLogger(__name__)


def _load(body: Union[bytes, str], document: str) -> Any:
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedSourceDocument(f"{document} is not valid JSON: {e}") from e


def _require(data: Any, key: str, expected: type, path: str) -> Any:
    """
    Fetch a required key and check its type.

    Args:
        data: Mapping expected to contain ``key``
        key: Key to fetch
        expected: Required type of the value
        path: Location of ``data`` in the document, for error messages

    Returns:
        The value under ``key``

    Raises:
        MalformedSourceDocument: If data is not a mapping, the key is
            missing, or the value has the wrong type
    """
    if not isinstance(data, dict):
        raise MalformedSourceDocument(f"{path} is not an object")
    if key not in data:
        raise MalformedSourceDocument(f"{path}.{key} is missing")

    value = data[key]
    # bool is an int subclass but never a valid id
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise MalformedSourceDocument(
            f"{path}.{key} should be {expected.__name__}, got {type(value).__name__}"
        )
    return value


def _optional_text(data: Dict[str, Any], key: str, path: str) -> str:
    value = data.get(key)
    if value is None:
        return ''
    if not isinstance(value, str):
        raise MalformedSourceDocument(f"{path}.{key} should be str")
    return value


def _optional_list(data: Dict[str, Any], key: str, path: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedSourceDocument(f"{path}.{key} should be list")
    return value


def _parse_links(data: Dict[str, Any], path: str) -> List[FrabLink]:
    links = []
    for i, item in enumerate(_optional_list(data, 'links', path)):
        link_path = f"{path}.links[{i}]"
        links.append(FrabLink(
            url=_require(item, 'url', str, link_path),
            title=_optional_text(item, 'title', link_path)
        ))
    return links


def _parse_event(data: Any, path: str) -> FrabEvent:
    persons = []
    for i, item in enumerate(_optional_list(data, 'persons', path)):
        person_path = f"{path}.persons[{i}]"
        persons.append(FrabPerson(
            id=_require(item, 'id', int, person_path),
            public_name=_optional_text(item, 'public_name', person_path)
        ))

    return FrabEvent(
        id=_require(data, 'id', int, path),
        title=_require(data, 'title', str, path),
        abstract=_optional_text(data, 'abstract', path),
        type=_require(data, 'type', str, path),
        date=_require(data, 'date', str, path),
        duration=_require(data, 'duration', str, path),
        room=_require(data, 'room', str, path),
        links=_parse_links(data, path),
        persons=persons
    )


def _parse_day(data: Any, path: str) -> FrabDay:
    rooms = {}
    for room, events in _require(data, 'rooms', dict, path).items():
        room_path = f"{path}.rooms[{room!r}]"
        if not isinstance(events, list):
            raise MalformedSourceDocument(f"{room_path} should be list")
        rooms[room] = []
        for i, item in enumerate(events):
            event_path = f"{room_path}[{i}]"
            event = _parse_event(item, event_path)
            # locations are registered by room key, events resolved by their room field
            if event.room != room:
                raise MalformedSourceDocument(
                    f"{event_path}.room is {event.room!r} but listed under {room!r}"
                )
            rooms[room].append(event)

    index = data.get('index')
    return FrabDay(
        rooms=rooms,
        index=index if isinstance(index, int) else None,
        date=data.get('date') if isinstance(data.get('date'), str) else None
    )


def parse_schedule(body: Union[bytes, str]) -> FrabSchedule:
    """
    Parse a frab schedule.json document.

    Args:
        body: Raw response body

    Returns:
        FrabSchedule with days, rooms and events in document order

    Raises:
        MalformedSourceDocument: If the document does not match the schema
    """
    data = _load(body, 'schedule.json')
    schedule = _require(data, 'schedule', dict, '$')
    conference = _require(schedule, 'conference', dict, '$.schedule')
    path = '$.schedule.conference'

    days = [
        _parse_day(day, f"{path}.days[{i}]")
        for i, day in enumerate(_require(conference, 'days', list, path))
    ]

    result = FrabSchedule(conference=FrabConference(
        acronym=_require(conference, 'acronym', str, path),
        title=_optional_text(conference, 'title', path),
        days=days
    ))
    logger.debug(f"Parsed schedule for {result.conference.acronym} with {len(days)} days")
    return result


def parse_speakers(body: Union[bytes, str]) -> List[FrabSpeaker]:
    """
    Parse a frab speakers.json document.

    Args:
        body: Raw response body

    Returns:
        Speakers in document order

    Raises:
        MalformedSourceDocument: If the document does not match the schema
    """
    data = _load(body, 'speakers.json')
    container = _require(data, 'schedule_speakers', dict, '$')
    path = '$.schedule_speakers.speakers'

    speakers = []
    for i, item in enumerate(_require(container, 'speakers', list, '$.schedule_speakers')):
        speaker_path = f"{path}[{i}]"
        speakers.append(FrabSpeaker(
            id=_require(item, 'id', int, speaker_path),
            public_name=_require(item, 'public_name', str, speaker_path),
            abstract=_optional_text(item, 'abstract', speaker_path),
            links=_parse_links(item, speaker_path)
        ))

    logger.debug(f"Parsed {len(speakers)} speakers")
    return speakers
