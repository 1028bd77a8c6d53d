#!/usr/bin/env python3
"""
Unit tests for the simulated quote source and core models.

Run with:
    python -m pytest tests/test_quotes.py -v
"""

import random
import sys
from dataclasses import replace
from pathlib import Path

import pytest

# Add project root to path for standalone execution
sys.path.insert(0, str(Path(__file__).parent.parent))

# ruff: noqa: E402
from ledger.core.config import DEFAULT_CONFIG
from ledger.core.models import Quote
from ledger.market import COMPANIES, build_app_state, generate_quotes, random_quote


class TestQuoteModel:
    """Tests for the Quote dataclass."""

    def test_percent_change(self):
        change = Quote(price=1000.0, price_yesterday=900.0).percent_change
        assert change == pytest.approx(11.1111, abs=1e-4)
        assert Quote(price=1500.0, price_yesterday=1500.0).percent_change == 0.0

    def test_yesterday_must_be_positive(self):
        with pytest.raises(ValueError):
            Quote(price=100.0, price_yesterday=0.0)
        with pytest.raises(ValueError):
            Quote(price=100.0, price_yesterday=-5.0)


class TestCompanies:
    """Tests for the fixed company list."""

    def test_ten_companies(self):
        assert len(COMPANIES) == 10

    def test_unique_tickers(self):
        tickers = [company.ticker for company in COMPANIES]
        assert len(set(tickers)) == len(tickers)

    def test_display_order(self):
        assert COMPANIES[0].ticker == "BCI"
        assert COMPANIES[-1].ticker == "GHRT"


class TestGenerateQuotes:
    """Tests for random quote generation."""

    def test_one_quote_per_company_in_order(self):
        quotes = generate_quotes(COMPANIES, random.Random(1))
        assert [q.company for q in quotes] == list(COMPANIES)

    def test_ranges(self):
        rng = random.Random(5)
        for _ in range(500):
            quote = random_quote(rng)
            assert 500.0 <= quote.price <= 3000.0
            assert quote.price_yesterday > 0
            pct = (quote.price_yesterday / quote.price - 1) * 100
            assert -10.0 - 1e-9 <= pct <= 10.0 + 1e-9

    def test_seed_is_reproducible(self):
        first = generate_quotes(COMPANIES, random.Random(9))
        second = generate_quotes(COMPANIES, random.Random(9))
        assert first == second

    def test_invalid_ranges(self):
        rng = random.Random(0)
        with pytest.raises(ValueError):
            random_quote(rng, price_range=(3000.0, 500.0))
        with pytest.raises(ValueError):
            random_quote(rng, price_range=(0.0, 500.0))
        with pytest.raises(ValueError):
            random_quote(rng, change_pct_range=(10.0, -10.0))

    def test_empty_company_list(self):
        assert generate_quotes([], random.Random(0)) == []


class TestBuildAppState:
    """Tests for the startup snapshot."""

    def test_uses_config_currency(self):
        config = replace(
            DEFAULT_CONFIG, currency_symbol="$", currency_name_plural="Dollars", seed=3
        )
        app_state = build_app_state(config)
        assert app_state.currency_symbol == "$"
        assert app_state.currency_name_plural == "Dollars"
        assert app_state.quote_count == 10

    def test_seeded_config_is_reproducible(self):
        config = replace(DEFAULT_CONFIG, seed=21)
        assert build_app_state(config) == build_app_state(config)

    def test_custom_price_range(self):
        config = replace(DEFAULT_CONFIG, price_min=10.0, price_max=20.0, seed=4)
        for stock_quote in build_app_state(config).quotes:
            assert 10.0 <= stock_quote.quote.price <= 20.0
