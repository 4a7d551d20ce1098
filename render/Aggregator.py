from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from client.protocol.FetchError import AggregateFetchError, FetchError
from client.protocol.FetchResult import FetchResult
from config.Config import FailurePolicy, TieBreak
from shared.Records import OutputRow


@dataclass
class AggregateResult:
    rows: list[OutputRow] = field(default_factory=list)
    failures: list[FetchError] = field(default_factory=list)
    requestedCount: int = 0

    @property
    def succeededCount(this) -> int:
        return len(this.rows)

    @property
    def failedCount(this) -> int:
        return len(this.failures)

    @property
    def complete(this) -> bool:
        return not this.failures and this.succeededCount == this.requestedCount


def sortRows(rows: Iterable[OutputRow], tieBreak: TieBreak = TieBreak.ARRIVAL) -> list[OutputRow]:
    """Order rows by UTC offset, highest first.

    ``sorted`` is stable, so with ``TieBreak.ARRIVAL`` rows sharing an offset keep the
    order they were handed in. That order is network completion order and differs
    between runs. ``TieBreak.ZONE`` orders such rows by zone id instead.
    """
    if tieBreak is TieBreak.ZONE:
        return sorted(rows, key=lambda row: (-row.offset, row.timeZone))

    return sorted(rows, key=lambda row: -row.offset)


def aggregate(
    results: Sequence[FetchResult],
    policy: FailurePolicy = FailurePolicy.BEST_EFFORT,
    tieBreak: TieBreak = TieBreak.ARRIVAL,
) -> AggregateResult:
    """Fan-in step: split fetch results and apply the failure policy.

    Results are taken in arrival order. Under ``FailurePolicy.FAIL_FAST`` a single
    failure discards every row and raises ``AggregateFetchError``.
    """
    ordered = sorted(results, key=lambda result: result.arrival)
    failures = [result.error for result in ordered if not result.ok]

    if failures and policy is FailurePolicy.FAIL_FAST:
        raise AggregateFetchError(failures)

    rows = [OutputRow.fromRecord(result.record) for result in ordered if result.ok]
    return AggregateResult(sortRows(rows, tieBreak), failures, len(results))
