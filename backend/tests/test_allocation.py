"""Tests for exact-sum charge allocation."""

import random
from decimal import Decimal

import pytest

from customs_entry.cost_allocator import (
    allocate_equally,
    allocate_proportional,
    apply_charges,
    parse_amount,
)
from customs_entry.schemas.declaration import Item, Valuation


def _cents(shares: list[str]) -> int:
    return sum(int(Decimal(s) * 100) for s in shares)


class TestParseAmount:
    def test_parses_numeric_strings(self):
        assert parse_amount("12.50") == Decimal("12.50")
        assert parse_amount(" 7 ") == Decimal("7")

    def test_numbers_are_accepted(self):
        assert parse_amount(3) == Decimal("3")
        assert parse_amount(2.5) == Decimal("2.5")

    def test_invalid_values_are_zero(self):
        assert parse_amount("abc") == 0
        assert parse_amount("") == 0
        assert parse_amount(None) == 0
        assert parse_amount("12abc") == 0

    def test_non_finite_values_are_zero(self):
        assert parse_amount("NaN") == 0
        assert parse_amount("Infinity") == 0
        assert parse_amount(float("inf")) == 0


class TestAllocateProportional:
    def test_splits_by_weight(self):
        assert allocate_proportional("100.00", ["200", "100"]) == ["66.67", "33.33"]

    def test_shares_sum_to_rounded_total(self):
        shares = allocate_proportional("1000.01", ["1", "1", "1", "1", "1", "1", "1"])
        assert _cents(shares) == 100001

    def test_ties_go_to_earliest_index(self):
        assert allocate_proportional("0.02", ["1", "1", "1"]) == ["0.01", "0.01", "0.00"]

    def test_zero_weights_receive_nothing(self):
        shares = allocate_proportional("50.00", ["0", "abc", "10"])
        assert shares == ["0.00", "0.00", "50.00"]

    def test_zero_total_is_all_zero(self):
        assert allocate_proportional("0", ["1", "2"]) == ["0.00", "0.00"]

    def test_zero_weight_sum_is_all_zero(self):
        assert allocate_proportional("10.00", ["0", ""]) == ["0.00", "0.00"]

    def test_negative_weights_count_as_zero(self):
        assert allocate_proportional("10.00", ["-5", "5"]) == ["0.00", "10.00"]

    def test_negative_total_keeps_sign(self):
        shares = allocate_proportional("-10.00", ["1", "2"])
        assert shares == ["-3.33", "-6.67"]
        assert _cents(shares) == -1000

    def test_total_is_rounded_half_up(self):
        assert allocate_proportional("10.005", ["1"]) == ["10.01"]

    def test_invalid_total_is_zero(self):
        assert allocate_proportional("n/a", ["1", "2"]) == ["0.00", "0.00"]

    def test_empty_weights(self):
        assert allocate_proportional("10.00", []) == []


class TestAllocateEqually:
    def test_first_shares_absorb_leftover_cents(self):
        assert allocate_equally("100.00", 3) == ["33.34", "33.33", "33.33"]

    def test_even_split(self):
        assert allocate_equally("10.00", 4) == ["2.50", "2.50", "2.50", "2.50"]

    def test_zero_count_is_empty(self):
        assert allocate_equally("10.00", 0) == []

    def test_invalid_total_is_zero(self):
        assert allocate_equally("", 2) == ["0.00", "0.00"]

    def test_sum_is_exact(self):
        assert _cents(allocate_equally("0.07", 3)) == 7


class TestApplyCharges:
    def test_proportional_when_net_cost_positive(self):
        items = [Item(cost="200.00"), Item(cost="100.00")]
        valuation = Valuation(net_cost="300.00", net_freight="100.00", net_insurance="10.00")

        result = apply_charges(items, valuation)

        assert [i.freight for i in result] == ["66.67", "33.33"]
        assert [i.insurance for i in result] == ["6.67", "3.33"]

    def test_equal_when_net_cost_missing(self):
        items = [Item(cost="5"), Item(cost="5"), Item(cost="5")]
        valuation = Valuation(net_cost="", net_freight="100.00", net_insurance="1.00")

        result = apply_charges(items, valuation)

        assert [i.freight for i in result] == ["33.34", "33.33", "33.33"]
        assert [i.insurance for i in result] == ["0.34", "0.33", "0.33"]

    def test_client_supplied_charges_are_overwritten(self):
        items = [Item(cost="10", freight="999.00", insurance="999.00")]
        valuation = Valuation(net_cost="10", net_freight="5", net_insurance="")

        result = apply_charges(items, valuation)

        assert result[0].freight == "5.00"
        assert result[0].insurance == "0.00"

    def test_inputs_are_not_mutated(self):
        items = [Item(cost="10")]
        apply_charges(items, Valuation(net_cost="10", net_freight="5"))
        assert items[0].freight == "0.00"

    def test_no_items(self):
        assert apply_charges([], Valuation(net_freight="10")) == []


def _random_amount(rng: random.Random) -> str:
    return f"{rng.randint(-100_000, 1_000_000) / 100:.2f}"


class TestExactSum:
    @pytest.mark.parametrize("seed", range(20))
    def test_proportional_shares_sum_to_total(self, seed):
        rng = random.Random(seed)
        for _ in range(150):
            total = _random_amount(rng)
            weights = [rng.choice([_random_amount(rng), "0", "", "abc"]) for _ in range(rng.randint(1, 12))]

            shares = allocate_proportional(total, weights)

            assert len(shares) == len(weights)
            assert all(len(s.split(".")[1]) == 2 for s in shares)
            if any(parse_amount(w) > 0 for w in weights):
                assert _cents(shares) == int(Decimal(total) * 100)
            else:
                assert _cents(shares) == 0

    @pytest.mark.parametrize("seed", range(20))
    def test_equal_shares_sum_to_total(self, seed):
        rng = random.Random(seed)
        for _ in range(150):
            total = _random_amount(rng)
            count = rng.randint(1, 12)

            shares = allocate_equally(total, count)

            assert len(shares) == count
            assert _cents(shares) == int(Decimal(total) * 100)
            cents = sorted(abs(int(Decimal(s) * 100)) for s in shares)
            assert cents[-1] - cents[0] <= 1
