import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Final, Self

from dataclasses_json import dataclass_json
from marshmallow import ValidationError

from client.protocol.FetchError import ConfigurationError
from shared.Timezones import Timezones
from shell.Logger import Logger


API_KEY_ENV: Final[str] = "TZ_API_KEY"
CONFIG_FILE: Final[Path] = Path("config.json")
DEFAULT_API_URL: Final[str] = "https://timezoneapi.io/api/timezone/"


class FailurePolicy(Enum):
    BEST_EFFORT = "bestEffort"
    FAIL_FAST = "failFast"


class TieBreak(Enum):
    ARRIVAL = "arrival"
    ZONE = "zone"


@dataclass_json
@dataclass
class FileConfig:
    zones: list[str] | None = None
    apiUrl: str | None = None
    concurrency: int | None = None
    failurePolicy: str | None = None
    tieBreak: str | None = None
    requestTimeout: float | None = None


@dataclass(frozen=True)
class Config:
    apiKey: str = field(repr=False)
    zones: tuple[str, ...] = Timezones.DEFAULT_ZONES
    apiUrl: str = DEFAULT_API_URL
    concurrency: int | None = None
    failurePolicy: FailurePolicy = FailurePolicy.BEST_EFFORT
    tieBreak: TieBreak = TieBreak.ARRIVAL
    requestTimeout: float | None = None

    @property
    def inFlightLimit(this) -> int:
        return this.concurrency or len(this.zones)

    @classmethod
    def readFileConfig(cls, configFile: Path) -> FileConfig:
        if not configFile.is_file():
            return FileConfig()

        try:
            with configFile.open("r") as f:
                return FileConfig.schema().loads(f.read())
        except (json.JSONDecodeError, ValidationError) as e:
            raise ConfigurationError(f"Malformed config file {configFile}: {e}") from e

    @classmethod
    def load(cls, configFile: Path | None = None, environ: Mapping[str, str] | None = None) -> Self:
        environ = os.environ if environ is None else environ
        configFile = CONFIG_FILE if configFile is None else configFile

        apiKey = environ.get(API_KEY_ENV, "").strip()
        if not apiKey:
            raise ConfigurationError(f"API key not found! Set the {API_KEY_ENV} environment variable.")

        fileConfig = cls.readFileConfig(configFile)

        zones = Timezones.DEFAULT_ZONES if fileConfig.zones is None else tuple(fileConfig.zones)
        if not zones:
            raise ConfigurationError("Zone list is empty.")

        if fileConfig.concurrency is not None and fileConfig.concurrency < 1:
            raise ConfigurationError(f"Concurrency must be at least 1, got {fileConfig.concurrency}.")

        if fileConfig.requestTimeout is not None and fileConfig.requestTimeout <= 0:
            raise ConfigurationError(f"Request timeout must be positive, got {fileConfig.requestTimeout}.")

        try:
            failurePolicy = FailurePolicy(fileConfig.failurePolicy or FailurePolicy.BEST_EFFORT.value)
            tieBreak = TieBreak(fileConfig.tieBreak or TieBreak.ARRIVAL.value)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        config = cls(
            apiKey=apiKey,
            zones=zones,
            apiUrl=fileConfig.apiUrl or DEFAULT_API_URL,
            concurrency=fileConfig.concurrency,
            failurePolicy=failurePolicy,
            tieBreak=tieBreak,
            requestTimeout=fileConfig.requestTimeout,
        )
        Logger.log(f"Loaded configuration: {len(config.zones)} zones, policy {config.failurePolicy.value}, tie-break {config.tieBreak.value}")
        return config
