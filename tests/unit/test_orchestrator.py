"""Unit tests for chat orchestration and prompt building."""
import pytest

from jarvis.services.chat.models import CartItem, UserProfile
from jarvis.services.chat.orchestrator import ChatOrchestrator, generate_order_id
from jarvis.services.chat.prompt import get_detected_order_context
from jarvis.services.llm.base import ChatMessage
from jarvis.services.ordering.models import OrderLine, OrderPreview, StockShortage


@pytest.fixture
def orchestrator(fake_chain, test_menu_repository, test_settings):
    """Orchestrator over the test menu and the fake Gemini chain."""
    return ChatOrchestrator(
        provider_chain=fake_chain,
        menu_repository=test_menu_repository,
        config=test_settings,
    )


class TestChatOrchestrator:
    """Test ChatOrchestrator.reply."""

    @pytest.mark.asyncio
    async def test_system_prompt_has_menu_and_status(self, orchestrator, gemini_provider):
        """The model sees the orderable menu and the canteen status."""
        await orchestrator.reply([ChatMessage(role="user", content="menu batao")])

        _, prompt = gemini_provider.calls[0]
        assert "Jarvis" in prompt
        assert "Samosa ₹15" in prompt
        assert "Cold Coffee" not in prompt
        assert "CANTEEN STATUS: OPEN (Timing: 9AM – 6PM)" in prompt
        assert "CURRENT USER INFO" not in prompt

    @pytest.mark.asyncio
    async def test_closed_canteen(self, orchestrator, gemini_provider, test_settings):
        """When closed the prompt says so and no order is detected."""
        test_settings.canteen_is_open = False

        reply = await orchestrator.reply([ChatMessage(role="user", content="2 samosa")])

        _, prompt = gemini_provider.calls[0]
        assert "CANTEEN STATUS: CLOSED" in prompt
        assert "DETECTED ORDER" not in prompt
        assert reply.action is None
        assert reply.order_preview is None

    @pytest.mark.asyncio
    async def test_only_latest_user_message_is_parsed(self, orchestrator):
        """Earlier turns do not produce order previews."""
        reply = await orchestrator.reply([
            ChatMessage(role="user", content="2 samosa"),
            ChatMessage(role="assistant", content="Samosa x2 ready to add!"),
            ChatMessage(role="user", content="thank you"),
        ])

        assert reply.action is None
        assert reply.order_preview is None

    @pytest.mark.asyncio
    async def test_shortage_only_goes_to_prompt(self, orchestrator, gemini_provider):
        """A shortage is told to the model but there is nothing to add to the cart."""
        reply = await orchestrator.reply([ChatMessage(role="user", content="5 veg momos")])

        _, prompt = gemini_provider.calls[0]
        assert "Veg Momos: asked for 5, only 2 left" in prompt
        assert reply.action is None

    @pytest.mark.asyncio
    async def test_preview_order(self, orchestrator, gemini_provider):
        """preview_order resolves against the menu without calling a model."""
        preview = await orchestrator.preview_order("do tea aur 1 plain dosa")

        assert [(line.name, line.quantity) for line in preview.items] == [
            ("Tea", 2), ("Plain Dosa", 1),
        ]
        assert preview.total == 70
        assert gemini_provider.calls == []

    @pytest.mark.asyncio
    async def test_confirm_order(self, orchestrator, gemini_provider):
        """Confirmation totals the cart and gives the model the order details."""
        reply = await orchestrator.confirm_order(
            UserProfile(name="Aman Verma", email="aman@college.edu"),
            [CartItem(name="Plain Dosa", price=50, quantity=1), CartItem(name="Tea", price=10, quantity=3)],
        )

        assert reply.action == "confirm_order"
        assert reply.total == 80
        assert reply.provider == "Gemini"
        _, prompt = gemini_provider.calls[0]
        assert "Student Name: Aman Verma" in prompt
        assert "Roll Number: N/A" in prompt
        assert f"Order ID: #{reply.order_id}" in prompt
        assert "Total: ₹80" in prompt


class TestPromptHelpers:
    """Test prompt helper functions."""

    def test_detected_order_context(self):
        preview = OrderPreview(
            text="2 samosa aur pizza",
            items=[OrderLine(name="Samosa", price=15, quantity=2, line_total=30)],
            not_found=["pizza"],
            shortages=[StockShortage(name="Veg Momos", requested=5, in_stock=2)],
            total=30,
        )

        context = get_detected_order_context(preview)

        assert "- Samosa x2 = ₹30" in context
        assert "- Not on the menu: pizza" in context
        assert "Total: ₹30" in context

    def test_order_ids_are_unique(self):
        ids = {generate_order_id() for _ in range(100)}

        assert len(ids) == 100
        assert all(order_id.startswith("ORD-") and len(order_id) == 12 for order_id in ids)
