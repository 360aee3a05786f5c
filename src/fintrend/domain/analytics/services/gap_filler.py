"""Gap filling for sparse time series.

Raw facts arrive only for buckets where something was recorded. Charts need
one row per bucket, so the missing rows are synthesized with one of two
policies:

- ZERO_FILL for flow metrics (spending, income): an empty bucket means
  nothing happened, so every series is 0.
- CARRY_FORWARD for stock metrics (balances, net worth): an empty bucket
  means no new snapshot, so each series keeps its last known value.

Facts are never dropped. A fact that cannot be placed in the window is
rejected with ValidationError instead.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal

from fintrend.domain.analytics.services.bucketing import (
    generate_buckets,
    parse_bucket_key,
)
from fintrend.domain.analytics.value_objects import (
    BalancePeriod,
    CategoryAmount,
    CategoryPeriod,
    DateRange,
    FillPolicy,
    PeriodGranularity,
    SeriesPoint,
)
from fintrend.domain.shared.amounts import ZERO
from fintrend.domain.shared.exceptions import (
    UnknownFillPolicyError,
    ValidationError,
)

WALLET_BALANCE = "wallet_balance"
SAVINGS_BALANCE = "savings_balance"
TOTAL_NET_WORTH = "total_net_worth"

NET_WORTH_METRICS: tuple[str, ...] = (
    WALLET_BALANCE,
    SAVINGS_BALANCE,
    TOTAL_NET_WORTH,
)


def _index_facts(
    facts: Iterable[SeriesPoint],
    buckets: Sequence[str],
    policy: FillPolicy,
) -> tuple[dict[str, SeriesPoint], list[SeriesPoint], list[str]]:
    """Split facts into in-window facts and pre-window (opening) facts.

    Also returns every series key in first-appearance order.
    """
    window = set(buckets)
    first_bucket = buckets[0] if buckets else None
    in_window: dict[str, SeriesPoint] = {}
    opening: list[SeriesPoint] = []
    seen_buckets: set[str] = set()
    keys: dict[str, None] = {}

    for fact in facts:
        if fact.bucket in seen_buckets:
            msg = f"Duplicate fact for bucket {fact.bucket}"
            raise ValidationError(msg, details={"bucket": fact.bucket})
        seen_buckets.add(fact.bucket)

        if fact.bucket in window:
            in_window[fact.bucket] = fact
        elif (
            policy is FillPolicy.CARRY_FORWARD
            and first_bucket is not None
            and fact.bucket < first_bucket
        ):
            opening.append(fact)
        else:
            msg = f"Fact for bucket {fact.bucket} lies outside the requested window"
            raise ValidationError(
                msg,
                details={
                    "bucket": fact.bucket,
                    "first_bucket": first_bucket,
                    "last_bucket": buckets[-1] if buckets else None,
                },
            )

        for key in fact.values:
            keys.setdefault(key, None)

    opening.sort(key=lambda point: point.bucket)
    return in_window, opening, list(keys)


def fill_series(
    facts: Iterable[SeriesPoint],
    buckets: Sequence[str],
    policy: FillPolicy | str,
) -> list[SeriesPoint]:
    """Reconcile sparse facts against the full bucket sequence.

    Parameters
    ----------
    facts
        Known rows, at most one per bucket, in any order
    buckets
        Complete, ordered bucket keys (see ``generate_buckets``)
    policy
        ZERO_FILL for flow metrics, CARRY_FORWARD for stock metrics

    Returns
    -------
    list[SeriesPoint]
        Exactly one row per bucket, in bucket order. Every row carries every
        series key seen in ``facts``; values present in a fact are kept as-is.

    Raises
    ------
    ValidationError
        On two facts for one bucket, or a fact outside the window (facts
        before the window are accepted under CARRY_FORWARD as opening values)
    UnknownFillPolicyError
        If ``policy`` is not a FillPolicy
    """
    policy = FillPolicy.parse(policy)
    in_window, opening, keys = _index_facts(facts, buckets, policy)

    if policy is FillPolicy.ZERO_FILL:
        return [
            SeriesPoint(
                bucket=bucket,
                values={
                    key: _value_or(in_window.get(bucket), key, ZERO)
                    for key in keys
                },
            )
            for bucket in buckets
        ]

    if policy is FillPolicy.CARRY_FORWARD:
        last_known: dict[str, Decimal] = dict.fromkeys(keys, ZERO)
        for fact in opening:
            last_known.update(fact.values)

        filled: list[SeriesPoint] = []
        for bucket in buckets:
            fact = in_window.get(bucket)
            if fact is not None:
                last_known.update(fact.values)
            filled.append(SeriesPoint(bucket=bucket, values=dict(last_known)))
        return filled

    raise UnknownFillPolicyError(policy)


def _value_or(fact: SeriesPoint | None, key: str, default: Decimal) -> Decimal:
    if fact is None:
        return default
    return fact.values.get(key, default)


def _validate_periods(periods: Iterable[str], granularity: PeriodGranularity) -> None:
    for period in periods:
        parse_bucket_key(period, granularity)


# ---------------------------------------------------------------------------
# Category (flow) series: spending and income
# ---------------------------------------------------------------------------


def category_periods_to_series(periods: Iterable[CategoryPeriod]) -> list[SeriesPoint]:
    """One SeriesPoint per period with one value per category id."""
    points: list[SeriesPoint] = []
    for item in periods:
        values: dict[str, Decimal] = {}
        for category in item.categories:
            values[category.id] = values.get(category.id, ZERO) + category.amount
        points.append(SeriesPoint(bucket=item.period, values=values))
    return points


def fill_category_periods(
    periods: Sequence[CategoryPeriod],
    date_range: DateRange,
    granularity: PeriodGranularity | str,
) -> list[CategoryPeriod]:
    """Zero-fill category trend facts over ``date_range``.

    Present periods are returned unchanged. A missing period lists every
    category seen anywhere in ``periods`` with amount 0.
    """
    granularity = PeriodGranularity.parse(granularity)
    _validate_periods((item.period for item in periods), granularity)
    buckets = generate_buckets(date_range, granularity)

    names: dict[str, str] = {}
    for item in periods:
        for category in item.categories:
            names.setdefault(category.id, category.name)

    filled_points = fill_series(
        category_periods_to_series(periods),
        buckets,
        FillPolicy.ZERO_FILL,
    )
    existing = {item.period: item for item in periods}

    filled: list[CategoryPeriod] = []
    for point in filled_points:
        item = existing.get(point.bucket)
        if item is not None:
            filled.append(item)
            continue
        filled.append(
            CategoryPeriod(
                period=point.bucket,
                categories=tuple(
                    CategoryAmount(
                        id=category_id,
                        name=names[category_id],
                        amount=ZERO,
                    )
                    for category_id in point.values
                ),
            ),
        )
    return filled


# ---------------------------------------------------------------------------
# Balance (stock) series: net worth and savings
# ---------------------------------------------------------------------------


def balance_periods_to_series(
    periods: Iterable[BalancePeriod],
    metrics: Sequence[str] = NET_WORTH_METRICS,
) -> list[SeriesPoint]:
    """One SeriesPoint per period holding the requested balance metrics."""
    return [
        SeriesPoint(
            bucket=item.period,
            values={metric: getattr(item, metric) for metric in metrics},
        )
        for item in periods
    ]


def fill_balance_periods(
    periods: Sequence[BalancePeriod],
    date_range: DateRange,
    granularity: PeriodGranularity | str,
) -> list[BalancePeriod]:
    """Carry wallet and savings balances forward over ``date_range``.

    Filled rows recompute ``total_net_worth`` from the carried balances;
    buckets before the first snapshot are 0.
    """
    granularity = PeriodGranularity.parse(granularity)
    _validate_periods((item.period for item in periods), granularity)
    buckets = generate_buckets(date_range, granularity)

    filled_points = fill_series(
        balance_periods_to_series(periods, (WALLET_BALANCE, SAVINGS_BALANCE)),
        buckets,
        FillPolicy.CARRY_FORWARD,
    )
    existing = {item.period: item for item in periods}

    return [
        existing.get(point.bucket)
        or BalancePeriod(
            period=point.bucket,
            wallet_balance=point.get(WALLET_BALANCE),
            savings_balance=point.get(SAVINGS_BALANCE),
        )
        for point in filled_points
    ]


def fill_savings_periods(
    periods: Sequence[BalancePeriod],
    date_range: DateRange,
    granularity: PeriodGranularity | str,
) -> list[BalancePeriod]:
    """Carry the savings balance forward over ``date_range``.

    Wallet balances are not relevant to the savings chart, so filled rows
    report 0 for them and a net worth equal to the savings balance.
    """
    granularity = PeriodGranularity.parse(granularity)
    _validate_periods((item.period for item in periods), granularity)
    buckets = generate_buckets(date_range, granularity)

    filled_points = fill_series(
        balance_periods_to_series(periods, (SAVINGS_BALANCE,)),
        buckets,
        FillPolicy.CARRY_FORWARD,
    )
    existing = {item.period: item for item in periods}

    filled: list[BalancePeriod] = []
    for point in filled_points:
        item = existing.get(point.bucket)
        if item is not None:
            filled.append(item)
            continue
        savings = point.get(SAVINGS_BALANCE)
        filled.append(
            BalancePeriod(
                period=point.bucket,
                wallet_balance=ZERO,
                savings_balance=savings,
                total_net_worth=savings,
            ),
        )
    return filled
