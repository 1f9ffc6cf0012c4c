from decimal import Decimal, localcontext

import pytest

from adapters.formatting import canonical_expression, format_display


@pytest.mark.parametrize(
    "value,expected",
    [
        (Decimal("2.50000000000000"), "2.5"),
        (Decimal("4"), "4"),
        (Decimal("4.000"), "4"),
        (Decimal("-2"), "-2"),
        (Decimal("0.00001"), "0.00001"),
        (Decimal("1E+20"), "100000000000000000000"),
        (Decimal("123456789012345678"), "123456789012346000"),
        (Decimal("-0"), "0"),
        (Decimal("0.000"), "0"),
    ],
)
def test_format_display(value, expected):
    assert format_display(value) == expected


def test_format_display_rounds_to_fifteen_significant_digits():
    with localcontext() as ctx:
        ctx.prec = 80
        third = Decimal(1) / Decimal(3)
        two_thirds = Decimal(2) / Decimal(3)

    assert format_display(third) == "0.333333333333333"
    assert format_display(two_thirds) == "0.666666666666667"


def test_format_display_rounds_half_up():
    assert format_display(Decimal("0.125"), significant_digits=2) == "0.13"
    assert format_display(Decimal("2.5"), significant_digits=1) == "3"


def test_format_display_never_leaves_trailing_point():
    assert format_display(Decimal("9.9999999999999999")) == "10"


def test_canonical_expression_uses_display_symbols():
    assert canonical_expression(" 2*3/4 ") == "2×3÷4"
    assert canonical_expression("") == ""
