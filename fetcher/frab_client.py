"""HTTP client for a frab conference's public JSON exports."""
import logging

import requests

from processor.errors import NetworkFailure

logger = logging.getLogger(__name__)


class FrabClient:
    """Fetches schedule.json and speakers.json from a frab instance."""

    SCHEDULE_PATH = '/public/schedule.json'
    SPEAKERS_PATH = '/public/speakers.json'

    def __init__(self, base_url: str, timeout: float = 2):
        """
        Initialize the client.

        Args:
            base_url: Conference URL, e.g. https://frab.example.org/en/conf
            timeout: HTTP request timeout in seconds (default: 2)
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def fetch_schedule(self) -> bytes:
        """Fetch the raw schedule.json body."""
        return self._get(self.SCHEDULE_PATH)

    def fetch_speakers(self) -> bytes:
        """Fetch the raw speakers.json body."""
        return self._get(self.SPEAKERS_PATH)

    def _get(self, path: str) -> bytes:
        """
        GET a document once, without retries.

        Args:
            path: Path below the conference URL

        Returns:
            Response body as bytes

        Raises:
            NetworkFailure: On connection errors, timeouts or non-2xx status
        """
        url = f"{self.base_url}{path}"
        logger.info(f"Fetching {url}")

        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise NetworkFailure(f"Unable to fetch {url}: {e}") from e

        return response.content
