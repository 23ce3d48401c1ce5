#!/usr/bin/env python3
"""Tests for Money primitive type."""

from decimal import Decimal

import pytest

from medexpense.core.money import Money


class TestMoneyConstruction:
    """Test Money class construction."""

    @pytest.mark.currency
    def test_from_cents(self):
        """Test creating Money from cents."""
        assert Money.from_cents(1234).to_cents() == 1234

    @pytest.mark.currency
    def test_from_dollars_string(self):
        """Test parsing from dollar strings."""
        assert Money.from_dollars("$12.34").to_cents() == 1234
        assert Money.from_dollars("1,234.56").to_cents() == 123456

    @pytest.mark.currency
    def test_from_dollars_int(self):
        """Test creating from integer dollars."""
        assert Money.from_dollars(12).to_cents() == 1200

    @pytest.mark.currency
    def test_from_dollars_rejects_bool(self):
        with pytest.raises(ValueError):
            Money.from_dollars(True)

    @pytest.mark.currency
    def test_from_dollars_float(self):
        """Test JSON float amounts convert without binary rounding errors."""
        assert Money.from_dollars(45.99).to_cents() == 4599
        assert Money.from_dollars(0.1 + 0.2).to_cents() == 30


class TestMoneyOperations:
    """Test Money arithmetic, comparison and formatting."""

    @pytest.mark.currency
    def test_arithmetic(self):
        a = Money.from_cents(100)
        b = Money.from_cents(30)

        assert (a + b).to_cents() == 130
        assert (a - b).to_cents() == 70
        assert (b - a).to_cents() == -70

    @pytest.mark.currency
    def test_comparisons(self):
        assert Money.from_cents(100) == Money.from_cents(100)
        assert Money.from_cents(100) < Money.from_cents(101)
        assert Money.from_cents(101) >= Money.from_cents(100)
        assert Money.from_cents(100) != 100

    @pytest.mark.currency
    def test_hashable(self):
        assert len({Money.from_cents(5), Money.from_cents(5)}) == 1

    @pytest.mark.currency
    def test_to_decimal_is_exact(self):
        assert Money.from_cents(4599).to_decimal() == Decimal("45.99")

    @pytest.mark.currency
    def test_formatting(self):
        assert str(Money.from_cents(4599)) == "$45.99"
        assert str(Money.from_cents(-5)) == "$-0.05"
        assert Money.from_cents(100).to_dollars() == "$1.00"
        assert repr(Money.from_cents(7)) == "Money(cents=7)"
