from typing import Final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from client.protocol.FetchError import RenderError
from render.Aggregator import AggregateResult
from shared.Records import OutputRow


class Renderer:
    TITLE: Final[str] = "World Clock"

    def __init__(this, console: Console | None = None, errorConsole: Console | None = None) -> None:
        this.console = console or Console()
        this.errorConsole = errorConsole or Console(stderr=True)

    def buildTable(this, rows: list[OutputRow]) -> Table:
        table = Table(title=this.TITLE)
        table.add_column("UTC offset", justify="left", style="green")
        table.add_column("Location", justify="left", style="cyan")
        table.add_column("Current time", style="magenta")

        for row in rows:
            table.add_row(str(row.offset), row.timeZone, row.currentTime)

        return table

    def render(this, result: AggregateResult) -> None:
        try:
            this.console.print(this.buildTable(result.rows))
            for failure in result.failures:
                this.errorConsole.print(f"[red]✗ {escape(failure.zone)}[/red]: {escape(failure.reason)}", highlight=False)
        except OSError as e:
            raise RenderError(f"Failed to print the table: {e}") from e
