"""Exact-sum monetary allocation. Pure functions with no store dependency.

Amounts are split in integer cents so the shares of a split always add back up
to the rounded total. Malformed numbers are treated as zero rather than raised.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from fractions import Fraction
from typing import Any, Sequence

CENT = Decimal("0.01")
ZERO_SHARE = "0.00"


def parse_amount(value: Any) -> Decimal:
    """Parse a money amount leniently: invalid, missing or non-finite values are 0."""
    if value is None or isinstance(value, bool):
        return Decimal(0)

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except InvalidOperation:
            return Decimal(0)
    else:
        return Decimal(0)

    if not amount.is_finite():
        return Decimal(0)
    return amount


def to_cents(total: Any) -> int:
    """Round an amount half-up to whole cents."""
    try:
        return int(parse_amount(total).quantize(CENT, rounding=ROUND_HALF_UP) * 100)
    except InvalidOperation:
        # Too large to quantize at the context precision
        return 0


def format_cents(cents: int) -> str:
    sign = "-" if cents < 0 else ""
    units, fraction = divmod(abs(cents), 100)
    return f"{sign}{units}.{fraction:02d}"


def _weight(value: Any) -> Fraction:
    amount = parse_amount(value)
    if amount <= 0:
        return Fraction(0)
    return Fraction(amount)


def allocate_proportional(total: Any, weights: Sequence[Any]) -> list[str]:
    """Split ``total`` across ``weights`` using the largest-remainder method.

    Returns one 2-decimal string per weight. The shares sum exactly to the
    total rounded to cents. Leftover cents go to the largest fractional
    remainders, earliest index first on ties. A zero total or zero weight sum
    yields all "0.00".
    """
    cents = to_cents(total)
    shares = [_weight(w) for w in weights]
    weight_sum = sum(shares, Fraction(0))

    if cents == 0 or weight_sum == 0:
        return [ZERO_SHARE] * len(shares)

    sign = -1 if cents < 0 else 1
    magnitude = abs(cents)

    exact = [magnitude * share / weight_sum for share in shares]
    allocated = [math.floor(x) for x in exact]
    leftover = magnitude - sum(allocated)

    # sorted() is stable under reverse=True, so equal remainders keep input order
    by_remainder = sorted(
        range(len(exact)), key=lambda i: exact[i] - allocated[i], reverse=True
    )
    for i in by_remainder[:leftover]:
        allocated[i] += 1

    return [format_cents(sign * c) for c in allocated]


def allocate_equally(total: Any, count: int) -> list[str]:
    """Split ``total`` into ``count`` equal shares; the first shares absorb leftover cents."""
    if count <= 0:
        return []

    cents = to_cents(total)
    sign = -1 if cents < 0 else 1
    base, remainder = divmod(abs(cents), count)

    return [
        format_cents(sign * (base + (1 if i < remainder else 0)))
        for i in range(count)
    ]
