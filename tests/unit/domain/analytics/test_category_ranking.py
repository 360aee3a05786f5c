"""Unit tests for category ranking and "Other" grouping."""

from decimal import Decimal

import pytest

from fintrend.domain.analytics.services import (
    OTHER_CATEGORY_ID,
    category_names,
    category_periods_to_series,
    category_total,
    extract_and_rank,
    group_small_categories,
    limit_categories,
    prepare_category_breakdown,
    sort_category_breakdown,
)
from fintrend.domain.analytics.value_objects import (
    CategoryAmount,
    CategoryBreakdownItem,
    CategoryPeriod,
)


def _period(period, **amounts):
    return CategoryPeriod(
        period,
        tuple(
            CategoryAmount(name.lower(), name, Decimal(str(amount)))
            for name, amount in amounts.items()
        ),
    )


def _amounts(item):
    return {category.name: category.amount for category in item.categories}


class TestExtractAndRank:
    def test_totals_across_periods_descending(self):
        periods = [
            _period("2024-01", Food=100, Rent=500),
            _period("2024-02", Food=450, Fun=20),
        ]

        ranked = extract_and_rank(periods)

        assert [(c.name, c.total) for c in ranked] == [
            ("Food", Decimal("550")),
            ("Rent", Decimal("500")),
            ("Fun", Decimal("20")),
        ]

    def test_ties_keep_first_appearance(self):
        periods = [_period("2024-01", Zeta=10, Alpha=10, Mid=10)]
        assert category_names(periods) == ["Zeta", "Alpha", "Mid"]

    def test_non_positive_amounts_are_skipped(self):
        periods = [_period("2024-01", Food=10, Refund=-5, Empty=0)]
        assert category_names(periods) == ["Food"]


class TestLimitCategories:
    """Limiting keeps the global top N and never changes a period's sum."""

    def test_long_tail_becomes_other(self):
        periods = [_period("2024-01", A=500, B=300, C=150, D=100, E=50)]

        (limited,) = limit_categories(periods, 3)

        assert _amounts(limited) == {
            "A": Decimal("500"),
            "B": Decimal("300"),
            "C": Decimal("150"),
            "Other": Decimal("150"),
        }
        assert limited.categories[-1].id == OTHER_CATEGORY_ID

    def test_top_set_is_global_not_per_period(self):
        periods = [
            _period("2024-01", A=1000, B=10),
            _period("2024-02", B=20, C=900),
        ]

        limited = limit_categories(periods, 1)

        assert _amounts(limited[0]) == {"A": Decimal("1000"), "Other": Decimal("10")}
        assert _amounts(limited[1]) == {"Other": Decimal("920")}

    @pytest.mark.parametrize("limit", [1, 2, 3, 4])
    def test_period_sums_are_preserved(self, limit):
        periods = [
            _period("2024-01", A="10.10", B="3.33", C="0.01", D="7"),
            _period("2024-02", B="1.5", D="2.25", E="99.99"),
            _period("2024-03"),
        ]

        limited = limit_categories(periods, limit)

        assert [item.total for item in limited] == [item.total for item in periods]

    def test_no_other_when_period_lost_nothing(self):
        periods = [
            _period("2024-01", A=100, B=50),
            _period("2024-02", A=10, C=5),
        ]
        limited = limit_categories(periods, 2)
        assert _amounts(limited[0]) == {"A": Decimal("100"), "B": Decimal("50")}
        assert _amounts(limited[1]) == {"A": Decimal("10"), "Other": Decimal("5")}

    def test_limit_covering_every_category_is_pass_through(self):
        periods = [_period("2024-01", A=1, B=2)]
        assert limit_categories(periods, 2) == periods
        assert limit_categories(periods, 10) == periods

    def test_zero_limit_means_no_limit(self):
        periods = [_period("2024-01", A=1, B=2, C=3)]
        assert limit_categories(periods, 0) == periods

    def test_empty_input(self):
        assert limit_categories([], 3) == []

    def test_category_total_of_other(self):
        periods = [
            _period("2024-01", A=500, B=300, C=150, D=100, E=50),
            _period("2024-02", A=1, E=7),
        ]
        limited = limit_categories(periods, 3)
        assert category_total(limited, OTHER_CATEGORY_ID) == Decimal("157")

    def test_real_category_named_other_keeps_its_own_column(self):
        periods = [
            CategoryPeriod(
                "2024-01",
                (
                    CategoryAmount("food", "Food", Decimal("100")),
                    CategoryAmount("other", "Other stuff", Decimal("50")),
                    CategoryAmount("fun", "Fun", Decimal("10")),
                ),
            ),
        ]

        (point,) = category_periods_to_series(limit_categories(periods, 2))

        assert point.values == {
            "food": Decimal("100"),
            "other": Decimal("50"),
            OTHER_CATEGORY_ID: Decimal("10"),
        }


class TestPrepareCategoryBreakdown:
    def test_sorted_with_percentages(self):
        amounts = [
            CategoryAmount("rent", "Rent", Decimal("300")),
            CategoryAmount("food", "Food", Decimal("600")),
            CategoryAmount("fun", "Fun", Decimal("100")),
        ]

        items = prepare_category_breakdown(amounts)

        assert [(i.category_name, i.percentage) for i in items] == [
            ("Food", Decimal("60.0")),
            ("Rent", Decimal("30.0")),
            ("Fun", Decimal("10.0")),
        ]

    def test_drops_non_positive_amounts(self):
        amounts = [
            CategoryAmount("food", "Food", Decimal("50")),
            CategoryAmount("refund", "Refund", Decimal("-20")),
            CategoryAmount("none", "None", Decimal("0")),
        ]
        items = prepare_category_breakdown(amounts)
        assert [i.category_id for i in items] == ["food"]
        assert items[0].percentage == Decimal("100.0")

    def test_groups_past_max_categories(self):
        amounts = [
            CategoryAmount(str(n), f"Cat {n}", Decimal(10 - n)) for n in range(10)
        ]

        items = prepare_category_breakdown(amounts, max_categories=8)

        assert len(items) == 9
        other = items[-1]
        assert other.category_id == OTHER_CATEGORY_ID
        assert other.amount == Decimal("3")  # 2 + 1
        assert sum(i.amount for i in items) == Decimal("55")

    @pytest.mark.parametrize("amounts", [None, []])
    def test_empty_input(self, amounts):
        assert prepare_category_breakdown(amounts) == []


class TestGroupSmallCategories:
    def test_under_limit_is_unchanged(self):
        items = [CategoryBreakdownItem("a", "A", Decimal("1"))]
        assert group_small_categories(items, 8) == items

    def test_zero_disables_grouping(self):
        items = [
            CategoryBreakdownItem(str(n), str(n), Decimal("1")) for n in range(3)
        ]
        assert group_small_categories(items, 0) == items

    def test_sort_is_stable(self):
        items = [
            CategoryBreakdownItem("b", "B", Decimal("5")),
            CategoryBreakdownItem("a", "A", Decimal("5")),
            CategoryBreakdownItem("c", "C", Decimal("9")),
        ]
        assert [i.category_id for i in sort_category_breakdown(items)] == [
            "c",
            "b",
            "a",
        ]
