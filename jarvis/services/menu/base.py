"""Menu provider interface."""
from abc import ABC, abstractmethod
from typing import List, Optional
from pydantic import BaseModel


class MenuItem(BaseModel):
    """Menu item model."""

    name: str
    price: float
    category: Optional[str] = None
    available: bool = True
    quantity: int = 0  # Units in stock
    preparation_time: int = 10  # Minutes
    description: Optional[str] = None

    @property
    def in_stock(self) -> bool:
        """Whether the item can be ordered right now."""
        return self.available and self.quantity > 0


class Menu(BaseModel):
    """Menu model."""

    items: List[MenuItem]
    categories: List[str] = []


class MenuProvider(ABC):
    """Abstract base class for menu providers."""

    @abstractmethod
    async def get_menu(self) -> Menu:
        """Get the full menu."""
        pass
