"""Shared fixtures: a fake aiohttp session and canned API payloads."""

import asyncio
import contextlib
import json

import pytest

from client.RequestBuilder import buildUrl
from config.Config import Config
from shell.Logger import Logger


def makePayload(zoneId, offset="1", hour="05", minutes="30", seconds="00", amPm="PM"):
    """Build a response body shaped like timezoneapi.io, unused fields included."""
    return {
        "meta": {"code": "200", "execution_time": "0.0012 seconds"},
        "data": {
            "timezone": {
                "id": zoneId,
                "location": "somewhere",
                "country_code": "XX",
                "capital": "Somewhere",
            },
            "datetime": {
                "date": "01/01/2024",
                "hour_12_wolz": hour.lstrip("0"),
                "hour_12_wilz": hour,
                "hour_24_wilz": hour,
                "hour_am_pm": amPm,
                "minutes": minutes,
                "seconds": seconds,
                "offset_seconds": str(int(offset) * 3600) if offset.lstrip("+-").isdigit() else "0",
                "offset_hours": offset,
                "offset_tzfull": None,
                "dst": "false",
            },
        },
    }


class FakeResponse:
    def __init__(self, body, status=200, delay=0.0):
        self.body = body if isinstance(body, str) else json.dumps(body)
        self.status = status
        self.delay = delay

    async def text(self):
        await asyncio.sleep(self.delay)
        return self.body


class FakeSession:
    """Stands in for aiohttp.ClientSession.get(); tracks calls and peak concurrency."""

    def __init__(self, responses):
        self.responses = responses
        self.calls = []
        self.inFlight = 0
        self.peakInFlight = 0

    @contextlib.asynccontextmanager
    async def _request(self, url):
        self.calls.append(url)
        self.inFlight += 1
        self.peakInFlight = max(self.peakInFlight, self.inFlight)
        try:
            outcome = self.responses[url]
            if isinstance(outcome, BaseException):
                await asyncio.sleep(0)
                raise outcome
            yield outcome
        finally:
            self.inFlight -= 1

    def get(self, url):
        return self._request(url)


@pytest.fixture(autouse=True)
def capturedLogs():
    """Collect Logger output instead of writing to stderr."""
    lines = []
    Logger.setLogFunction(lines.append)
    yield lines
    Logger.resetLogFunction()


@pytest.fixture
def config():
    return Config(apiKey="secret", zones=("Europe/Lisbon", "America/Chicago", "America/Los_Angeles"))


@pytest.fixture
def urlFor(config):
    def _urlFor(zone):
        return buildUrl(config.apiUrl, zone, config.apiKey)
    return _urlFor
