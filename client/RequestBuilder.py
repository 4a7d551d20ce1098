from dataclasses import dataclass

from config.Config import Config


@dataclass(frozen=True)
class ZoneRequest:
    zone: str
    url: str

    def __str__(this) -> str:
        return f"ZoneRequest({this.zone})"


def buildUrl(apiUrl: str, zone: str, apiKey: str) -> str:
    # timezoneapi.io takes the zone as a bare query component
    return f"{apiUrl}?{zone}&token={apiKey}"


def buildRequests(config: Config) -> list[ZoneRequest]:
    return [ZoneRequest(zone, buildUrl(config.apiUrl, zone, config.apiKey)) for zone in config.zones]
