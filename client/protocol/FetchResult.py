from dataclasses import dataclass

from client.RequestBuilder import ZoneRequest
from client.protocol.FetchError import FetchError
from shared.Records import TimezoneRecord


@dataclass(frozen=True)
class FetchResult:
    request: ZoneRequest
    record: TimezoneRecord | None = None
    error: FetchError | None = None
    arrival: int = 0

    @property
    def ok(this) -> bool:
        return this.error is None and this.record is not None

    def __str__(this) -> str:
        status = "OK" if this.ok else str(this.error)
        return f"FetchResult({this.request.zone}, #{this.arrival}, {status})"
