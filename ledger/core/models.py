"""
Core data models for the dashboard.

Contains dataclasses for:
- Company identity records
- Current/previous day quotes
- The immutable application snapshot rendered every frame
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Company:
    """A listed company. Created once at startup, never mutated."""

    ticker: str  # "BCI", "AETH", ...
    name: str
    description: str


@dataclass(frozen=True)
class Quote:
    """
    Current and previous day price for one company.

    Example: price=1000.0, price_yesterday=900.0 -> +11.11%
    """

    price: float
    price_yesterday: float

    def __post_init__(self) -> None:
        if self.price_yesterday <= 0:
            raise ValueError(f"price_yesterday must be positive, got {self.price_yesterday}")

    @property
    def percent_change(self) -> float:
        """Change versus yesterday in percent."""
        return (self.price - self.price_yesterday) / self.price_yesterday * 100


@dataclass(frozen=True)
class StockQuote:
    """A quote paired with the company it belongs to.

    The company is a shared handle into the startup company list.
    """

    company: Company
    quote: Quote


@dataclass(frozen=True)
class AppState:
    """Snapshot rendered each frame. Quote order is display order."""

    quotes: tuple[StockQuote, ...]
    currency_symbol: str
    currency_name_plural: str

    @property
    def quote_count(self) -> int:
        return len(self.quotes)
