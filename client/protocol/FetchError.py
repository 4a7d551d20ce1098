class WorldClockError(Exception):
    pass


class ConfigurationError(WorldClockError):
    pass


class FetchError(WorldClockError):
    kind: str = "Fetch"

    def __init__(this, zone: str, reason: str) -> None:
        super().__init__(f"{this.kind} error for {zone}: {reason}")
        this.zone = zone
        this.reason = reason


class TransportError(FetchError):
    kind = "Transport"


class ApiError(FetchError):
    kind = "API"


class DecodeError(FetchError):
    kind = "Decode"


class FieldParseError(FetchError):
    kind = "Field parse"


class AggregateFetchError(WorldClockError):
    def __init__(this, failures: list[FetchError]) -> None:
        super().__init__(f"{len(failures)} zone(s) failed: {', '.join(failure.zone for failure in failures)}")
        this.failures = failures


class RenderError(WorldClockError):
    pass
