"""Unit tests for menu service and repository."""
import pytest
from jarvis.services.menu.repository import MenuRepository
from jarvis.services.menu.in_memory_menu import InMemoryMenuProvider


class TestMenuService:
    """Test menu repository and provider."""

    @pytest.mark.asyncio
    async def test_load_menu_from_yaml(self, test_menu_repository):
        """Test loading menu from YAML file."""
        menu = await test_menu_repository.get_menu()

        # Verify items parsed correctly, in file order
        assert len(menu.items) == 7
        assert menu.items[0].name == "Tea"
        assert menu.items[2].name == "Samosa"
        assert menu.items[4].quantity == 2

        # Categories come from the file
        assert menu.categories == ["snacks", "meals", "beverages"]

    @pytest.mark.asyncio
    async def test_available_items(self, test_menu_repository):
        """Switched-off and sold-out items are not orderable."""
        items = await test_menu_repository.get_available_items()
        names = [item.name for item in items]

        assert "Cold Coffee" not in names
        assert "Boil Egg" not in names
        assert len(names) == 5

    @pytest.mark.asyncio
    async def test_menu_text(self, test_menu_repository):
        """Menu text lists orderable items grouped by category."""
        text = await test_menu_repository.get_menu_text()

        assert text.startswith("Menu:")
        assert "Snacks:" in text
        assert "Samosa ₹15 (30 left, ~5 min)" in text
        assert "Veg Momos ₹60 (2 left, ~12 min)" in text
        assert "Cold Coffee" not in text
        assert "Boil Egg" not in text
        assert text.index("Snacks:") < text.index("Meals:") < text.index("Beverages:")

    @pytest.mark.asyncio
    async def test_default_menu_when_file_missing(self, tmp_path):
        """A missing menu file falls back to the built-in menu."""
        repository = MenuRepository(InMemoryMenuProvider(menu_file=str(tmp_path / "nope.yaml")))

        menu = await repository.get_menu()

        assert [item.name for item in menu.items] == ["Samosa", "Tea", "Veg Momos"]

    @pytest.mark.asyncio
    async def test_categories_derived_when_not_listed(self, tmp_path):
        """Without a categories list, categories are taken from the items."""
        menu_file = tmp_path / "menu.yaml"
        menu_file.write_text(
            "items:\n"
            "  - {name: Upma, price: 30, category: meals, quantity: 5}\n"
            "  - {name: Milk, price: 20, category: beverages, quantity: 5}\n"
            "  - {name: Poha, price: 25, quantity: 5}\n",
            encoding="utf-8",
        )
        repository = MenuRepository(InMemoryMenuProvider(menu_file=str(menu_file)))

        menu = await repository.get_menu()
        text = await repository.get_menu_text()

        assert menu.categories == ["beverages", "meals"]
        assert "Other:" in text
        assert "Poha" in text

    @pytest.mark.asyncio
    async def test_empty_menu_text(self, tmp_path):
        """A menu with nothing orderable says so."""
        menu_file = tmp_path / "menu.yaml"
        menu_file.write_text("items: []\n", encoding="utf-8")
        repository = MenuRepository(InMemoryMenuProvider(menu_file=str(menu_file)))

        assert await repository.get_menu_text() == "Menu: no items available right now."

    @pytest.mark.asyncio
    async def test_bundled_menu_loads(self):
        """The menu shipped with the service parses."""
        repository = MenuRepository(InMemoryMenuProvider())

        items = await repository.get_available_items()

        assert any(item.name == "Samosa" for item in items)
