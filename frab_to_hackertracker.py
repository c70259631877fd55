"""Convert a frab conference schedule into HackerTracker JSON files."""
import argparse
import json
import logging
import os
import sys
import time
from dataclasses import dataclass
from typing import List, Optional

from fetcher.frab_client import FrabClient
from fetcher.frab_reader import parse_schedule, parse_speakers
from processor.errors import ConversionError
from processor.event_times import current_timestamp
from processor.schedule_processor import ScheduleProcessor
from storage.hackertracker_writer import HackerTrackerWriter


# Attributes every LogRecord carries; anything else came in through extra=
_RECORD_ATTRIBUTES = set(vars(logging.LogRecord('', 0, '', 0, '', None, None))) | {'message', 'asctime'}


class JsonFormatter(logging.Formatter):
    """JSON formatter that also emits fields passed through extra=."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'message': record.getMessage(),
            'logger': record.name
        }

        for key, value in vars(record).items():
            if key not in _RECORD_ATTRIBUTES and key not in log_data:
                log_data[key] = value

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def setup_logging(log_level: str = 'INFO') -> None:
    """
    Configure logging with JSON formatter.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root_logger.addHandler(handler)

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


@dataclass
class ConverterConfig:
    """Settings for one conversion run."""
    frab_url: str
    save_dir: str = '.'
    base_id: int = 0
    timeout_seconds: float = 2
    log_level: str = 'INFO'


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser; defaults come from the environment."""
    parser = argparse.ArgumentParser(
        description='Convert a frab conference schedule to HackerTracker JSON.'
    )
    parser.add_argument(
        '--frab',
        default=os.environ.get('FRAB_URL', ''),
        help='URL to frab conference (env: FRAB_URL)'
    )
    parser.add_argument(
        '--save',
        default=os.environ.get('SAVE_DIR', '.'),
        help='path to save output files to (env: SAVE_DIR)'
    )
    parser.add_argument(
        '--id',
        type=int,
        default=os.environ.get('BASE_ID', '0'),
        help='base ID to add all object IDs to (env: BASE_ID)'
    )
    parser.add_argument(
        '--timeout',
        type=float,
        default=os.environ.get('TIMEOUT_SECONDS', '2'),
        help='HTTP timeout in seconds (env: TIMEOUT_SECONDS)'
    )
    parser.add_argument(
        '--log-level',
        default=os.environ.get('LOG_LEVEL', 'INFO'),
        help='DEBUG, INFO, WARNING or ERROR (env: LOG_LEVEL)'
    )
    return parser


def parse_config(argv: Optional[List[str]] = None) -> ConverterConfig:
    """
    Parse command line arguments into a ConverterConfig.

    Exits with status 2 on usage errors, including a missing frab URL.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.frab:
        parser.error('Missing FRAB URL')

    return ConverterConfig(
        frab_url=args.frab,
        save_dir=args.save,
        base_id=args.id,
        timeout_seconds=args.timeout,
        log_level=args.log_level
    )


def run(config: ConverterConfig, updated_at: str) -> List[str]:
    """
    Fetch, convert and write one conference.

    Args:
        config: Run settings
        updated_at: Timestamp stamped on every output record

    Returns:
        Paths of the written files

    Raises:
        ConversionError: On any fetch, parse, serialization or write failure
    """
    logger = logging.getLogger(__name__)
    client = FrabClient(config.frab_url, timeout=config.timeout_seconds)
    processor = ScheduleProcessor(base_id=config.base_id, updated_at=updated_at)
    writer = HackerTrackerWriter(config.save_dir)

    logger.info("Fetching frab documents")
    schedule_body = client.fetch_schedule()
    speakers_body = client.fetch_speakers()

    schedule = parse_schedule(schedule_body)
    speakers = parse_speakers(speakers_body)
    logger.info(
        f"Converting {schedule.conference.title or schedule.conference.acronym}",
        extra={'conference': schedule.conference.acronym}
    )

    documents = processor.process(schedule, speakers)
    return writer.write_all(documents)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command line entry point.

    Returns:
        Process exit status: 0 on success, 1 on failure
    """
    updated_at = current_timestamp()
    config = parse_config(argv)

    setup_logging(config.log_level)
    logger = logging.getLogger(__name__)

    start_time = time.time()
    logger.info(
        "Conversion started",
        extra={
            'frab_url': config.frab_url,
            'save_dir': config.save_dir,
            'base_id': config.base_id
        }
    )

    try:
        paths = run(config, updated_at)
    except ConversionError as e:
        logger.error(
            f"Conversion failed: {e}",
            extra={'error_type': type(e).__name__},
            exc_info=True
        )
        return 1
    except Exception as e:
        logger.error(
            f"Unexpected error during conversion: {e}",
            extra={'error_type': type(e).__name__},
            exc_info=True
        )
        return 1

    duration = time.time() - start_time
    logger.info(
        f"Conversion completed successfully, wrote {len(paths)} files",
        extra={'duration_seconds': round(duration, 2)}
    )
    return 0


if __name__ == '__main__':
    sys.exit(main())
