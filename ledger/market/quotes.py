"""
Simulated quote generation.

Produces one random quote per company at startup. No live updates.
"""

import logging
import random
from collections.abc import Sequence

from ledger.core.config import DEFAULT_CONFIG, DashboardConfig
from ledger.core.models import AppState, Company, Quote, StockQuote
from ledger.market.companies import COMPANIES

logger = logging.getLogger(__name__)


def random_quote(
    rng: random.Random,
    price_range: tuple[float, float] = (500.0, 3000.0),
    change_pct_range: tuple[float, float] = (-10.0, 10.0),
) -> Quote:
    """
    Sample a quote.

    Args:
        rng: Source of randomness
        price_range: (min, max) for the current price
        change_pct_range: (min, max) percent applied to derive yesterday's price

    Returns:
        Quote with price_yesterday = price * (1 + pct / 100)
    """
    price_min, price_max = price_range
    pct_min, pct_max = change_pct_range
    if price_min <= 0 or price_max < price_min:
        raise ValueError(f"Invalid price range: {price_range}")
    if pct_max < pct_min or pct_min <= -100:
        raise ValueError(f"Invalid change percent range: {change_pct_range}")

    price = rng.uniform(price_min, price_max)
    pct = rng.uniform(pct_min, pct_max)
    return Quote(price=price, price_yesterday=(1 + pct / 100) * price)


def generate_quotes(
    companies: Sequence[Company],
    rng: random.Random,
    price_range: tuple[float, float] = (500.0, 3000.0),
    change_pct_range: tuple[float, float] = (-10.0, 10.0),
) -> list[StockQuote]:
    """Generate one quote per company, preserving company order."""
    return [
        StockQuote(company=company, quote=random_quote(rng, price_range, change_pct_range))
        for company in companies
    ]


def build_app_state(
    config: DashboardConfig = DEFAULT_CONFIG,
    companies: Sequence[Company] = COMPANIES,
    rng: random.Random | None = None,
) -> AppState:
    """Build the startup snapshot from config and the company list."""
    rng = rng or random.Random(config.seed)
    quotes = generate_quotes(
        companies,
        rng,
        price_range=(config.price_min, config.price_max),
        change_pct_range=(config.change_pct_min, config.change_pct_max),
    )
    logger.info(f"Generated {len(quotes)} quotes (seed={config.seed})")
    return AppState(
        quotes=tuple(quotes),
        currency_symbol=config.currency_symbol,
        currency_name_plural=config.currency_name_plural,
    )
