"""Category ranking, long-tail grouping and breakdown preparation.

Two shapes are handled:

- multi-period trend facts (CategoryPeriod): rank categories over the whole
  request, keep the global top N in every period and fold the rest of each
  period into a synthetic "Other" category.
- a single-period breakdown (doughnut chart): filter, sort, group the tail
  into "Other" and attach percentages.

Grouping never changes a period's sum: "Other" carries exactly the amounts
it replaces.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal

from fintrend.domain.analytics.value_objects import (
    CategoryAmount,
    CategoryBreakdownItem,
    CategoryPeriod,
    CategoryTotal,
)
from fintrend.domain.shared.amounts import ZERO, decimal_sum

# Reserved id; real category ids never carry the double-underscore wrapping
OTHER_CATEGORY_ID = "__other__"
OTHER_CATEGORY_NAME = "Other"

# Maximum number of categories to display before grouping into "Other"
MAX_CATEGORIES = 8

PERCENTAGE_QUANTUM = Decimal("0.1")


def filter_valid_categories(
    categories: Iterable[CategoryAmount],
) -> list[CategoryAmount]:
    """Drop zero and negative amounts; they cannot be drawn as slices."""
    return [category for category in categories if category.amount > 0]


def extract_and_rank(periods: Iterable[CategoryPeriod]) -> list[CategoryTotal]:
    """Total every category across all periods and rank by total.

    Categories with an amount ``<= 0`` are skipped before totalling. The sort
    is descending by total; ties keep first-appearance order.
    """
    totals: dict[str, Decimal] = {}
    names: dict[str, str] = {}

    for item in periods:
        for category in filter_valid_categories(item.categories):
            if category.id not in totals:
                totals[category.id] = ZERO
                names[category.id] = category.name
            totals[category.id] += category.amount

    ranked = sorted(totals.items(), key=lambda entry: entry[1], reverse=True)
    return [
        CategoryTotal(id=category_id, name=names[category_id], total=total)
        for category_id, total in ranked
    ]


def category_names(periods: Iterable[CategoryPeriod]) -> list[str]:
    """Category names ordered by rank."""
    return [category.name for category in extract_and_rank(periods)]


def limit_categories(
    periods: Sequence[CategoryPeriod],
    limit: int,
) -> list[CategoryPeriod]:
    """Keep the global top ``limit`` categories and group the rest as "Other".

    The top set is ranked once over all periods, so every period keeps the
    same categories. Each period that lost at least one category gets one
    trailing "Other" entry holding the sum of what it lost, which keeps every
    period's total unchanged.

    ``limit <= 0`` means no limiting. When ``limit`` covers every ranked
    category the input is returned unchanged.
    """
    if not periods or limit <= 0:
        return list(periods)

    ranked = extract_and_rank(periods)
    if len(ranked) <= limit:
        return list(periods)

    top_ids = {category.id for category in ranked[:limit]}

    limited: list[CategoryPeriod] = []
    for item in periods:
        kept: list[CategoryAmount] = []
        dropped: list[CategoryAmount] = []
        for category in item.categories:
            if category.id in top_ids:
                kept.append(category)
            else:
                dropped.append(category)

        if dropped:
            kept.append(
                CategoryAmount(
                    id=OTHER_CATEGORY_ID,
                    name=OTHER_CATEGORY_NAME,
                    amount=decimal_sum(category.amount for category in dropped),
                ),
            )

        limited.append(CategoryPeriod(period=item.period, categories=tuple(kept)))

    return limited


def category_total(periods: Iterable[CategoryPeriod], category_id: str) -> Decimal:
    """Sum one category over all periods."""
    return decimal_sum(
        category.amount
        for item in periods
        for category in item.categories
        if category.id == category_id
    )


def calculate_total_amount(items: Iterable[CategoryBreakdownItem]) -> Decimal:
    return decimal_sum(item.amount for item in items)


def sort_category_breakdown(
    items: Iterable[CategoryBreakdownItem],
) -> list[CategoryBreakdownItem]:
    """Sort by amount, largest first (stable)."""
    return sorted(items, key=lambda item: item.amount, reverse=True)


def _percentage(amount: Decimal, total: Decimal) -> Decimal:
    if total <= 0:
        return ZERO
    return (amount / total * 100).quantize(PERCENTAGE_QUANTUM)


def group_small_categories(
    items: Sequence[CategoryBreakdownItem],
    max_categories: int = MAX_CATEGORIES,
) -> list[CategoryBreakdownItem]:
    """Fold everything after the first ``max_categories`` items into "Other".

    ``items`` should already be sorted. ``max_categories <= 0`` disables
    grouping.
    """
    if max_categories <= 0 or len(items) <= max_categories:
        return list(items)

    top = list(items[:max_categories])
    rest = items[max_categories:]

    other_total = calculate_total_amount(rest)
    grand_total = calculate_total_amount(items)

    top.append(
        CategoryBreakdownItem(
            category_id=OTHER_CATEGORY_ID,
            category_name=OTHER_CATEGORY_NAME,
            amount=other_total,
            percentage=_percentage(other_total, grand_total),
        ),
    )
    return top


def prepare_category_breakdown(
    amounts: Iterable[CategoryAmount] | None,
    max_categories: int = MAX_CATEGORIES,
) -> list[CategoryBreakdownItem]:
    """Prepare a single-period breakdown for a doughnut chart.

    - drops amounts ``<= 0``
    - sorts by amount, largest first
    - computes percentages of the total (one decimal place)
    - groups the tail into "Other" past ``max_categories``
    """
    if not amounts:
        return []

    valid = filter_valid_categories(amounts)
    total = decimal_sum(category.amount for category in valid)

    items = [
        CategoryBreakdownItem(
            category_id=category.id,
            category_name=category.name,
            amount=category.amount,
            percentage=_percentage(category.amount, total),
        )
        for category in valid
    ]
    return group_small_categories(sort_category_breakdown(items), max_categories)
