"""
Tests for StationConfig.
"""

import pytest

from waqi_station import const
from waqi_station.config import StationConfig
from waqi_station.exceptions import ConfigurationError


class TestStationConfig:
    """Test suite for StationConfig."""

    def test_defaults(self):
        config = StationConfig(station="london", token="secret")

        assert config.request_timeout == const.REQUEST_TIMEOUT
        assert config.cache_dir == const.CACHE_DIR
        assert config.use_nominatim is True
        assert config.detail_url == "https://aqicn.org/city/london/"

    @pytest.mark.parametrize("station, token", [("", "secret"), ("london", "")])
    def test_missing_values_raise(self, station, token):
        with pytest.raises(ConfigurationError):
            StationConfig(station=station, token=token)

    def test_non_positive_timeout_raises(self):
        with pytest.raises(ConfigurationError):
            StationConfig(station="london", token="secret", request_timeout=0)

    @pytest.mark.parametrize("timeout", ["soon", None, float("nan"), -1.5])
    def test_invalid_timeout_raises(self, timeout):
        with pytest.raises(ConfigurationError):
            StationConfig(station="london", token="secret", request_timeout=timeout)

    def test_numeric_string_timeout_is_coerced(self):
        config = StationConfig(station="london", token="secret", request_timeout="30")

        assert config.request_timeout == 30.0

    def test_from_env(self):
        config = StationConfig.from_env({
            "WAQI_STATION": "@5724",
            "WAQI_TOKEN": "secret",
            "WAQI_TIMEOUT": "12.5",
            "WAQI_CACHE_DIR": "/var/cache/aqicn",
        })

        assert config.station == "@5724"
        assert config.token == "secret"
        assert config.request_timeout == 12.5
        assert config.cache_dir == "/var/cache/aqicn"

    def test_from_env_missing_station(self):
        with pytest.raises(ConfigurationError):
            StationConfig.from_env({"WAQI_TOKEN": "secret"})

    def test_from_env_bad_timeout(self):
        with pytest.raises(ConfigurationError):
            StationConfig.from_env({
                "WAQI_STATION": "london",
                "WAQI_TOKEN": "secret",
                "WAQI_TIMEOUT": "soon",
            })

    def test_from_env_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("WAQI_STATION", "paris")
        monkeypatch.setenv("WAQI_TOKEN", "secret")
        monkeypatch.delenv("WAQI_TIMEOUT", raising=False)
        monkeypatch.delenv("WAQI_CACHE_DIR", raising=False)

        config = StationConfig.from_env()

        assert config.station == "paris"
        assert config.request_timeout == const.REQUEST_TIMEOUT
