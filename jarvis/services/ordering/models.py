"""Order intent models."""
from enum import Enum
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from jarvis.services.ordering.constants import MAX_QUANTITY, MIN_QUANTITY


class ParsedItem(BaseModel):
    """One item intent extracted from a chat line."""

    model_config = ConfigDict(frozen=True)

    raw_name: str = Field(min_length=1)
    quantity: int = Field(default=1, ge=MIN_QUANTITY, le=MAX_QUANTITY)


class MatchTier(str, Enum):
    """Which fuzzy-matching rule resolved a name."""

    EXACT = "exact"
    PREFIX = "prefix"
    CONTAINS = "contains"
    REVERSE_CONTAINS = "reverse_contains"
    TOKEN_OVERLAP = "token_overlap"

    def __str__(self) -> str:
        return self.value


class MatchResult(BaseModel):
    """Outcome of matching a name against the menu. ``item`` is None when unresolved."""

    query: str
    item: Optional[Any] = None
    tier: Optional[MatchTier] = None
    score: Optional[float] = None

    @property
    def resolved(self) -> bool:
        return self.item is not None


class OrderLine(BaseModel):
    """A parsed item resolved to a menu entry."""

    name: str
    price: float
    quantity: int
    line_total: float


class StockShortage(BaseModel):
    """A resolved item the canteen cannot supply in the requested quantity."""

    name: str
    requested: int
    in_stock: int


class OrderPreview(BaseModel):
    """Quick-order preview built from one chat line."""

    text: str
    parsed: List[ParsedItem] = []
    items: List[OrderLine] = []
    not_found: List[str] = []
    shortages: List[StockShortage] = []
    total: float = 0

    @property
    def is_orderable(self) -> bool:
        return bool(self.items) and not self.shortages
