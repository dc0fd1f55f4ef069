"""
Tests for the moon phase client, with the HTTP session mocked out.
"""

from datetime import date
from unittest.mock import Mock

import pytest
import requests

from timebar.moon_phase import (
    MoonPhase,
    MoonPhaseClient,
    MoonPhaseError,
    get_moon_phase,
    process_moon_data,
)

# March 2019 supermoon
SUPERMOON_JSON = """{
  "error": false,
  "apiversion": "2.2.1",
  "year": 2019,
  "month": 3,
  "day": 20,
  "numphases": 1,
  "datechanged": false,
  "phasedata": [
    {"phase": "Full Moon", "date": "2019 Mar 21", "time": "01:43"}
  ]
}"""


@pytest.fixture
def session():
    response = Mock()
    response.text = SUPERMOON_JSON
    session = Mock()
    session.get.return_value = response
    return session


class TestProcessMoonData:
    """Tests for parsing USNO responses."""

    def test_full_moon(self):
        assert process_moon_data(SUPERMOON_JSON) == MoonPhase.FULL

    @pytest.mark.parametrize("name, phase", [
        ("New Moon", MoonPhase.NEW),
        ("First Quarter", MoonPhase.FIRST_QUARTER),
        ("Last Quarter", MoonPhase.LAST_QUARTER),
    ])
    def test_other_phases(self, name, phase):
        assert process_moon_data(SUPERMOON_JSON.replace("Full Moon", name)) == phase

    def test_truncated_json(self):
        with pytest.raises(MoonPhaseError) as exc_info:
            process_moon_data('{"error": false, "apiversion": "2.2.1", "nump')
        assert exc_info.value.found is None
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_unknown_phase(self):
        with pytest.raises(MoonPhaseError) as exc_info:
            process_moon_data(SUPERMOON_JSON.replace("Full Moon", "Blue Moon"))
        assert exc_info.value.found == "Blue Moon"
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert "got 'Blue Moon'" in str(exc_info.value)

    def test_missing_phase_data(self):
        with pytest.raises(MoonPhaseError) as exc_info:
            process_moon_data('{"error": true, "phasedata": []}')
        assert exc_info.value.found is None
        assert isinstance(exc_info.value.__cause__, IndexError)

    def test_missing_phase_key(self):
        with pytest.raises(MoonPhaseError) as exc_info:
            process_moon_data('{"error": true}')
        assert isinstance(exc_info.value.__cause__, KeyError)


class TestMoonPhaseClient:
    """Tests for the HTTP side."""

    def test_url_for_date(self):
        client = MoonPhaseClient(session=Mock())
        assert client.url_for(date(2019, 3, 17)) == \
            "https://api.usno.navy.mil/moon/phase?date=03/17/2019&nump=1"

    def test_get_usno_json(self, session):
        client = MoonPhaseClient(session=session, timeout=3)
        assert client.get_usno_json(date(2019, 3, 17)) == SUPERMOON_JSON
        session.get.assert_called_once_with(
            "https://api.usno.navy.mil/moon/phase?date=03/17/2019&nump=1", timeout=3)

    def test_http_error_propagates(self, session):
        session.get.return_value.raise_for_status.side_effect = requests.HTTPError("503 Server Error")
        client = MoonPhaseClient(session=session)
        with pytest.raises(requests.HTTPError):
            client.get_usno_json(date(2019, 3, 17))

    def test_get_moon_phase(self, session):
        assert get_moon_phase(date(2019, 3, 17), MoonPhaseClient(session=session)) == MoonPhase.FULL
