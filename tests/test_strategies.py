"""
Tests for the built-in revenue and bonus rules and the money helpers.
"""

from decimal import Decimal

import pytest

from app.models import LineItem, Product, SellerStats
from app.money import round_money, to_decimal
from app.strategies import calculate_bonus_by_profit, calculate_simple_revenue


def line(sale_price, quantity, discount=0):
    return LineItem(sku="P1", sale_price=Decimal(str(sale_price)), quantity=quantity,
                    discount=Decimal(str(discount)))


STATS = SellerStats(seller_id="S1", name="Anna Berg", profit=Decimal("1000"))


class TestSimpleRevenue:
    def test_no_discount(self):
        assert calculate_simple_revenue(line(20, 2)) == Decimal("40")

    def test_discount_percent(self):
        assert calculate_simple_revenue(line("19.99", 3, 15)) == Decimal("50.9745")

    def test_full_discount_is_free(self):
        assert calculate_simple_revenue(line(100, 4, 100)) == Decimal("0")

    def test_discount_over_100_is_not_clamped(self):
        assert calculate_simple_revenue(line(100, 1, 150)) == Decimal("-50")

    def test_product_is_ignored(self):
        product = Product(sku="P1", name="Widget", purchase_price=Decimal("99"))
        assert calculate_simple_revenue(line(10, 1), product) == calculate_simple_revenue(line(10, 1))


class TestBonusByProfit:
    @pytest.mark.parametrize(
        "index, total, rate",
        [
            (0, 1, "0.15"),   # first and last at once: first wins
            (0, 10, "0.15"),
            (1, 2, "0.10"),   # second and last at once: second wins
            (2, 3, "0.10"),
            (1, 10, "0.10"),
            (2, 10, "0.10"),
            (3, 4, "0.00"),
            (9, 10, "0.00"),
            (3, 10, "0.05"),
            (8, 10, "0.05"),
        ],
    )
    def test_tiers(self, index, total, rate):
        assert calculate_bonus_by_profit(index, total, STATS) == Decimal(rate)

    def test_returns_rate_not_amount(self):
        # profit is 1000; the amount would be 150
        assert calculate_bonus_by_profit(0, 3, STATS) == Decimal("0.15")


class TestMoney:
    @pytest.mark.parametrize(
        "amount, expected",
        [
            ("0.125", "0.13"),
            ("-0.125", "-0.13"),
            ("2.675", "2.68"),
            ("2.674", "2.67"),
            ("10", "10.00"),
        ],
    )
    def test_round_money_half_away_from_zero(self, amount, expected):
        assert str(round_money(Decimal(amount))) == expected

    def test_to_decimal_float_goes_through_str(self):
        assert to_decimal(0.1) == Decimal("0.1")

    def test_to_decimal_int(self):
        assert to_decimal(7) == Decimal("7")

    def test_to_decimal_passes_decimal_through(self):
        value = Decimal("1.23")
        assert to_decimal(value) is value

    @pytest.mark.parametrize("value", ["1.5", None, True])
    def test_to_decimal_rejects_non_numbers(self, value):
        with pytest.raises(TypeError):
            to_decimal(value)
