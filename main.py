#!/usr/bin/env python3
import asyncio
import sys

from client.Fetcher import TimezoneFetcher
from client.RequestBuilder import buildRequests
from client.protocol.FetchError import WorldClockError
from config.Config import Config
from render.Aggregator import aggregate
from render.Renderer import Renderer
from shell.Logger import Logger


async def main(config: Config | None = None, renderer: Renderer | None = None) -> int:
    try:
        config = config or Config.load()
        requests = buildRequests(config)
        results = await TimezoneFetcher(config).fetchAll(requests)
        result = aggregate(results, config.failurePolicy, config.tieBreak)
        (renderer or Renderer()).render(result)
    except WorldClockError as e:
        Logger.error(e)
        return 1

    if not result.complete:
        Logger.warning(f"Showing {result.succeededCount} of {result.requestedCount} zones")
        return 1

    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
