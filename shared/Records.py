from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class TimezoneRecord:
    zoneId: str
    hour: str
    minutes: str
    seconds: str
    amPm: str
    offset: int

    @property
    def currentTime(this) -> str:
        return f"{this.hour}:{this.minutes}:{this.seconds} {this.amPm}"


@dataclass(frozen=True)
class OutputRow:
    offset: int
    timeZone: str
    currentTime: str

    @classmethod
    def fromRecord(cls, record: TimezoneRecord) -> Self:
        return cls(record.offset, record.zoneId, record.currentTime)
