"""Tests for startup configuration and request building."""

import json

import pytest

from client.RequestBuilder import buildRequests, buildUrl
from client.protocol.FetchError import ConfigurationError
from config.Config import DEFAULT_API_URL, Config, FailurePolicy, TieBreak
from shared.Timezones import Timezones


class TestConfigLoad:
    """Test Config.load()."""

    def test_missing_api_key(self, tmp_path):
        with pytest.raises(ConfigurationError):
            Config.load(tmp_path / "config.json", environ={})

    def test_blank_api_key(self, tmp_path):
        with pytest.raises(ConfigurationError):
            Config.load(tmp_path / "config.json", environ={"TZ_API_KEY": "   "})

    def test_defaults_without_config_file(self, tmp_path):
        config = Config.load(tmp_path / "config.json", environ={"TZ_API_KEY": "abc"})

        assert config.apiKey == "abc"
        assert config.zones == Timezones.DEFAULT_ZONES
        assert config.apiUrl == DEFAULT_API_URL
        assert config.failurePolicy is FailurePolicy.BEST_EFFORT
        assert config.tieBreak is TieBreak.ARRIVAL
        assert config.requestTimeout is None
        assert config.inFlightLimit == len(Timezones.DEFAULT_ZONES)

    def test_reads_environment_by_default(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TZ_API_KEY", "from-env")
        monkeypatch.chdir(tmp_path)

        assert Config.load().apiKey == "from-env"

    def test_config_file_overrides(self, tmp_path):
        configFile = tmp_path / "config.json"
        configFile.write_text(json.dumps({
            "zones": ["Asia/Tokyo", "UTC"],
            "concurrency": 1,
            "failurePolicy": "failFast",
            "tieBreak": "zone",
            "requestTimeout": 2.5,
        }))

        config = Config.load(configFile, environ={"TZ_API_KEY": "abc"})

        assert config.zones == ("Asia/Tokyo", "UTC")
        assert config.inFlightLimit == 1
        assert config.failurePolicy is FailurePolicy.FAIL_FAST
        assert config.tieBreak is TieBreak.ZONE
        assert config.requestTimeout == 2.5

    @pytest.mark.parametrize("content", [
        "{not json",
        json.dumps({"zones": []}),
        json.dumps({"concurrency": 0}),
        json.dumps({"requestTimeout": -1}),
        json.dumps({"failurePolicy": "sometimes"}),
        json.dumps({"tieBreak": "random"}),
    ])
    def test_invalid_config_file(self, tmp_path, content):
        configFile = tmp_path / "config.json"
        configFile.write_text(content)

        with pytest.raises(ConfigurationError):
            Config.load(configFile, environ={"TZ_API_KEY": "abc"})

    def test_api_key_not_in_repr(self):
        assert "hunter2" not in repr(Config(apiKey="hunter2"))


class TestRequestBuilder:
    """Test building one request URL per zone."""

    def test_url_format(self):
        url = buildUrl("https://timezoneapi.io/api/timezone/", "Europe/Lisbon", "tok")
        assert url == "https://timezoneapi.io/api/timezone/?Europe/Lisbon&token=tok"

    def test_one_request_per_zone_in_order(self):
        config = Config(apiKey="tok")
        requests = buildRequests(config)

        assert [request.zone for request in requests] == list(Timezones.DEFAULT_ZONES)
        assert all(request.url.endswith("&token=tok") for request in requests)

    def test_zone_is_not_validated(self):
        requests = buildRequests(Config(apiKey="tok", zones=("not a zone",)))
        assert requests[0].url == f"{DEFAULT_API_URL}?not a zone&token=tok"
