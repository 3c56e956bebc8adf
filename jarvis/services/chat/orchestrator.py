"""Chat orchestration: quick-order parsing, prompt building and LLM fallback."""
import logging
import uuid
from typing import List, Optional, Sequence

from jarvis.core.config import Settings
from jarvis.services.chat.models import CanteenStatus, CartItem, ChatReply, UserProfile
from jarvis.services.chat.prompt import (
    get_detected_order_context,
    get_order_confirmation_context,
    get_system_prompt,
)
from jarvis.services.llm.base import ChatMessage
from jarvis.services.llm.chain import ProviderChain
from jarvis.services.menu.repository import MenuRepository
from jarvis.services.ordering.models import OrderPreview
from jarvis.services.ordering.resolver import resolve_order

logger = logging.getLogger(__name__)

PLACE_ORDER_MESSAGE = "I want to place my order"


def generate_order_id() -> str:
    """Short unique order id, e.g. ORD-1A2B3C4D."""
    return f"ORD-{uuid.uuid4().hex[:8].upper()}"


class ChatOrchestrator:
    """Turns a chat request into an assistant reply and an optional order action."""

    def __init__(
        self,
        provider_chain: ProviderChain,
        menu_repository: MenuRepository,
        config: Settings,
    ):
        self.provider_chain = provider_chain
        self.menu_repository = menu_repository
        self.config = config

    async def preview_order(self, text: str) -> OrderPreview:
        """Resolve a quick-order line against the live menu."""
        menu = await self.menu_repository.get_menu()
        return resolve_order(text, menu.items)

    async def _build_system_prompt(self, user_profile: Optional[UserProfile]) -> str:
        menu_text = await self.menu_repository.get_menu_text()
        return get_system_prompt(
            canteen_name=self.config.canteen_name,
            menu_text=menu_text,
            status=CanteenStatus.from_settings(self.config),
            user_profile=user_profile,
        )

    async def reply(
        self,
        messages: Sequence[ChatMessage],
        user_profile: Optional[UserProfile] = None,
        cart: Optional[List[CartItem]] = None,
        action: Optional[str] = None,
    ) -> ChatReply:
        """
        Answer one chat turn.

        A "place_order" action with a cart and a user profile produces an order
        confirmation. Otherwise the latest user message is run through the
        quick-order parser; any items it resolves are handed to the model as
        context and returned as an "add_to_cart" preview.
        """
        if action == "place_order" and cart and user_profile:
            return await self.confirm_order(user_profile, cart)

        system_prompt = await self._build_system_prompt(user_profile)

        preview = None
        latest = next((m for m in reversed(messages) if m.role == "user"), None)
        if latest is not None and self.config.canteen_is_open:
            preview = await self.preview_order(latest.content)
            if preview.items or preview.shortages:
                system_prompt += get_detected_order_context(preview)

        logger.info(
            f"[CHAT] Turn - {len(messages)} messages, "
            f"detected items: {len(preview.items) if preview else 0}"
        )
        result = await self.provider_chain.chat(messages, system_prompt)

        has_items = preview is not None and bool(preview.items)
        return ChatReply(
            message=result.response_text,
            provider=result.provider_name,
            action="add_to_cart" if has_items else None,
            order_preview=preview if has_items else None,
        )

    async def confirm_order(self, user_profile: UserProfile, cart: List[CartItem]) -> ChatReply:
        """Generate an order id and a confirmation message for the cart."""
        order_id = generate_order_id()
        total = sum(item.line_total for item in cart)

        system_prompt = await self._build_system_prompt(user_profile)
        system_prompt += get_order_confirmation_context(user_profile, cart, total, order_id)

        logger.info(f"[CHAT] Order confirmation - {order_id}, {len(cart)} items, total: {total:g}")
        result = await self.provider_chain.chat(
            [ChatMessage(role="user", content=PLACE_ORDER_MESSAGE)], system_prompt
        )
        return ChatReply(
            message=result.response_text,
            provider=result.provider_name,
            action="confirm_order",
            order_id=order_id,
            total=total,
        )
