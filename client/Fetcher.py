import asyncio
import contextlib
import dataclasses
from collections.abc import Sequence
from copy import deepcopy
from typing import AsyncGenerator, Final

from aiohttp import ClientError, ClientSession, ClientTimeout, TCPConnector

from client.RequestBuilder import ZoneRequest
from client.protocol.ApiResponse import ApiResponse
from client.protocol.FetchError import ApiError, DecodeError, FetchError, FieldParseError, TransportError
from client.protocol.FetchResult import FetchResult
from config.Config import Config
from shared.Helpers import Helpers
from shared.Records import TimezoneRecord
from shared.Timezones import Timezones
from shell.Logger import Logger


class TimezoneFetcher:
    type Headers = dict[str, str]

    HTTP_HEADERS: Final[Headers] = {
        "User-Agent": "WorldClock",
        "Accept": "application/json",
        "Accept-Encoding": "gzip, deflate",
    }
    API_OK_CODE: Final[str] = "200"

    def __init__(this, config: Config) -> None:
        this.config = config

    # HTTP Client
    @contextlib.asynccontextmanager
    async def getNewClient(this) -> AsyncGenerator[ClientSession, None]:
        headersCpy = deepcopy(this.HTTP_HEADERS)
        # shared by every request of a run
        connector = TCPConnector(limit=this.config.inFlightLimit)
        session = ClientSession(headers=headersCpy, connector=connector, timeout=ClientTimeout(total=this.config.requestTimeout))
        try:
            yield session
        finally:
            await session.close()

    async def fetchZone(this, session: ClientSession, request: ZoneRequest, semaphore: asyncio.Semaphore) -> FetchResult:
        async with semaphore:
            Logger.log(f"Fetching {request.zone} from {Helpers.redactToken(request.url)}")
            try:
                async with session.get(request.url) as response:
                    body = await response.text()
                    if response.status != 200:
                        return FetchResult(request, error=TransportError(request.zone, f"HTTP {response.status}"))
            except (ClientError, TimeoutError) as e:
                return FetchResult(request, error=TransportError(request.zone, repr(e)))
            except UnicodeDecodeError as e:
                return FetchResult(request, error=DecodeError(request.zone, f"undecodable body ({e.reason})"))

        try:
            record = await this.parseBody(request.zone, body)
        except (ApiError, DecodeError, FieldParseError) as e:
            return FetchResult(request, error=e)

        Logger.success(f"Fetched {request.zone}: {record.currentTime} (UTC{record.offset:+d})")
        return FetchResult(request, record=record)

    @staticmethod
    def requireStr(zone: str, name: str, value: object) -> str:
        if not isinstance(value, str):
            raise DecodeError(zone, f"{name} is {value!r}, expected a string")

        return value

    async def parseBody(this, zone: str, body: str) -> TimezoneRecord:
        payload = await Helpers.parseJson(body)
        if payload is None:
            raise DecodeError(zone, "response body is not a JSON object")

        meta = payload.get("meta")
        if isinstance(meta, dict) and meta.get("code") is not None and str(meta["code"]) != this.API_OK_CODE:
            raise ApiError(zone, f"code {meta['code']}: {meta.get('message', 'no message')}")

        try:
            parsed: ApiResponse = ApiResponse.from_dict(payload)
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            raise DecodeError(zone, f"response does not match the schema ({e!r})") from e

        if parsed.data is None or parsed.data.timezone is None or parsed.data.datetime is None:
            raise DecodeError(zone, "response is missing data.timezone or data.datetime")

        dt = parsed.data.datetime
        offset = Helpers.parseOffset(dt.offset_hours)
        if offset is None:
            raise FieldParseError(zone, f"offset_hours {dt.offset_hours!r} is not a whole number of hours")

        if not Timezones.isValidOffset(offset):
            raise FieldParseError(zone, f"offset_hours {offset} outside [{Timezones.MIN_OFFSET}, {Timezones.MAX_OFFSET}]")

        return TimezoneRecord(
            zoneId=this.requireStr(zone, "timezone.id", parsed.data.timezone.id),
            hour=this.requireStr(zone, "datetime.hour_12_wilz", dt.hour_12_wilz),
            minutes=this.requireStr(zone, "datetime.minutes", dt.minutes),
            seconds=this.requireStr(zone, "datetime.seconds", dt.seconds),
            amPm=this.requireStr(zone, "datetime.hour_am_pm", dt.hour_am_pm),
            offset=offset,
        )

    async def guardedFetchZone(this, session: ClientSession, request: ZoneRequest, semaphore: asyncio.Semaphore) -> FetchResult:
        try:
            return await this.fetchZone(session, request, semaphore)
        except Exception as e:  # noqa: BLE001
            return FetchResult(request, error=FetchError(request.zone, f"unexpected {e!r}"))

    async def gather(this, session: ClientSession, requests: Sequence[ZoneRequest]) -> list[FetchResult]:
        semaphore = asyncio.Semaphore(this.config.inFlightLimit)
        tasks = [asyncio.create_task(this.guardedFetchZone(session, request, semaphore)) for request in requests]

        results: list[FetchResult] = []
        for arrival, nextDone in enumerate(asyncio.as_completed(tasks)):
            result = await nextDone
            if not result.ok:
                Logger.error(result.error)
            results.append(dataclasses.replace(result, arrival=arrival))

        return results

    async def fetchAll(this, requests: Sequence[ZoneRequest]) -> list[FetchResult]:
        Logger.log(f"Fetching {len(requests)} zones, at most {this.config.inFlightLimit} in flight")
        async with this.getNewClient() as session:
            results = await this.gather(session, requests)

        failed = sum(1 for result in results if not result.ok)
        if failed:
            Logger.warning(f"{failed} of {len(results)} fetches failed")
        else:
            Logger.success(f"All {len(results)} fetches succeeded")

        return results
