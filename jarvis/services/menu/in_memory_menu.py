"""In-memory menu provider."""
import yaml
from pathlib import Path
from typing import Optional
from jarvis.services.menu.base import Menu, MenuItem, MenuProvider


class InMemoryMenuProvider(MenuProvider):
    """In-memory menu provider using YAML configuration."""

    def __init__(self, menu_file: Optional[str] = None):
        """Initialize with optional menu file path."""
        if menu_file is None:
            menu_file = Path(__file__).parent / "data" / "menu.yaml"
        self.menu_file = Path(menu_file)
        self._menu: Optional[Menu] = None

    async def _load_menu(self) -> Menu:
        """Load menu from YAML file."""
        if self._menu is None:
            if not self.menu_file.exists():
                # Default menu if file doesn't exist
                self._menu = Menu(
                    items=[
                        MenuItem(
                            name="Samosa",
                            price=15,
                            category="snacks",
                            quantity=40,
                            preparation_time=5,
                        ),
                        MenuItem(
                            name="Tea",
                            price=10,
                            category="beverages",
                            quantity=100,
                            preparation_time=3,
                        ),
                        MenuItem(
                            name="Veg Momos",
                            price=60,
                            category="snacks",
                            quantity=20,
                            preparation_time=12,
                        ),
                    ],
                    categories=["snacks", "beverages"],
                )
            else:
                with open(self.menu_file, "r") as f:
                    data = yaml.safe_load(f) or {}
                    items = [
                        MenuItem(**item) for item in data.get("items", [])
                    ]
                    categories = data.get("categories") or sorted(
                        {item.category for item in items if item.category}
                    )
                    self._menu = Menu(items=items, categories=categories)
        return self._menu

    async def get_menu(self) -> Menu:
        """Get the full menu."""
        return await self._load_menu()
