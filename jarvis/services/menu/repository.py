"""Menu repository."""
from typing import List
from jarvis.services.menu.base import Menu, MenuItem, MenuProvider


class MenuRepository:
    """Repository for menu operations."""

    def __init__(self, provider: MenuProvider):
        self.provider = provider

    async def get_menu(self) -> Menu:
        """Get the full menu."""
        return await self.provider.get_menu()

    async def get_available_items(self) -> List[MenuItem]:
        """Get items that are switched on and still in stock."""
        menu = await self.get_menu()
        return [item for item in menu.items if item.in_stock]

    async def get_menu_text(self) -> str:
        """Get the orderable menu as formatted text for LLM context."""
        items = await self.get_available_items()
        if not items:
            return "Menu: no items available right now."

        menu = await self.get_menu()
        categories = list(menu.categories)
        for item in items:
            if item.category and item.category not in categories:
                categories.append(item.category)

        lines = ["Menu:"]
        for category in categories:
            category_items = [item for item in items if item.category == category]
            if not category_items:
                continue
            lines.append(f"\n{category.title()}:")
            for item in category_items:
                lines.append(f"  - {self._format_item(item)}")

        uncategorized = [item for item in items if not item.category]
        if uncategorized:
            lines.append("\nOther:")
            for item in uncategorized:
                lines.append(f"  - {self._format_item(item)}")
        return "\n".join(lines)

    @staticmethod
    def _format_item(item: MenuItem) -> str:
        desc_str = f" - {item.description}" if item.description else ""
        return (
            f"{item.name} ₹{item.price:g} ({item.quantity} left, "
            f"~{item.preparation_time} min){desc_str}"
        )
