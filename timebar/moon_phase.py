"""
Moon phase lookup against the USNO astronomical applications API.

Not used by the dashboard refresh loop; reachable from the CLI with
--moon-phase.
"""

import json
import logging
from datetime import date
from enum import Enum
from typing import Optional

import requests

logger = logging.getLogger(__name__)

USNO_URL_FORMAT = "https://api.usno.navy.mil/moon/phase?date=%m/%d/%Y&nump=1"
DEFAULT_TIMEOUT = 10


class MoonPhase(Enum):
    NEW = "New Moon"
    FIRST_QUARTER = "First Quarter"
    FULL = "Full Moon"
    LAST_QUARTER = "Last Quarter"


class MoonPhaseError(Exception):
    """The API answered with something that is not a known phase."""

    def __init__(self, found: Optional[str] = None):
        self.found = found
        super().__init__(
            "Expected one of `New Moon`, `First Quarter`, `Full Moon`, "
            f"or `Last Quarter`, got {found!r}"
        )


class MoonPhaseClient:
    """Thin wrapper over a requests session so tests can swap the transport."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = DEFAULT_TIMEOUT):
        self.session = session or requests.Session()
        self.timeout = timeout

    def url_for(self, day: date) -> str:
        return day.strftime(USNO_URL_FORMAT)

    def get_usno_json(self, day: date) -> str:
        """Fetch the raw phase JSON for a date."""
        url = self.url_for(day)
        logger.debug("Requesting moon phase: %s", url)
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.text


def process_moon_data(moon_json: str) -> MoonPhase:
    """Read the first phase out of a USNO response body."""
    try:
        data = json.loads(moon_json)
    except ValueError as e:
        raise MoonPhaseError(None) from e

    try:
        found = data["phasedata"][0]["phase"]
    except (KeyError, IndexError, TypeError) as e:
        raise MoonPhaseError(None) from e

    try:
        return MoonPhase(found)
    except ValueError as e:
        raise MoonPhaseError(found if isinstance(found, str) else None) from e


def get_moon_phase(day: date, client: Optional[MoonPhaseClient] = None) -> MoonPhase:
    if client is None:
        client = MoonPhaseClient()
    return process_moon_data(client.get_usno_json(day))
