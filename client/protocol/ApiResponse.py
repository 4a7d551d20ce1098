from dataclasses import dataclass

from dataclasses_json import Undefined, dataclass_json


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class Meta:
    code: str | None = None
    execution_time: str | None = None


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class Timezone:
    id: str


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class Datetime:
    hour_12_wilz: str
    minutes: str
    seconds: str
    hour_am_pm: str
    offset_hours: str


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class Data:
    timezone: Timezone
    datetime: Datetime


@dataclass_json(undefined=Undefined.EXCLUDE)
@dataclass
class ApiResponse:
    data: Data
    meta: Meta | None = None
