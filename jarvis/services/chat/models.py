"""Chat request/response models."""
from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from jarvis.core.config import Settings
from jarvis.services.llm.base import ChatMessage
from jarvis.services.ordering.models import OrderPreview


class UserProfile(BaseModel):
    """Signed-in student as known to the auth service."""

    name: str = ""
    email: Optional[str] = None
    roll_number: Optional[str] = None


class CartItem(BaseModel):
    """Item in the student's cart."""

    name: str
    price: float = Field(ge=0)
    quantity: int = Field(ge=1)

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


class CanteenStatus(BaseModel):
    """Whether the canteen is taking orders and its timing."""

    is_open: bool = True
    timing: str = "9AM – 6PM"
    contact_phone: str = ""

    @classmethod
    def from_settings(cls, config: Settings) -> "CanteenStatus":
        return cls(
            is_open=config.canteen_is_open,
            timing=config.canteen_timing,
            contact_phone=config.canteen_contact_phone,
        )


class ChatRequest(BaseModel):
    """Body of POST /api/chat."""

    messages: List[ChatMessage] = []
    cart: List[CartItem] = []
    user_profile: Optional[UserProfile] = None
    action: Optional[Literal["place_order"]] = None


class ChatReply(BaseModel):
    """Assistant reply plus any order action for the client to take."""

    message: str
    provider: str
    action: Optional[Literal["confirm_order", "add_to_cart"]] = None
    order_id: Optional[str] = None
    total: Optional[float] = None
    order_preview: Optional[OrderPreview] = None


class JarvisParseRequest(BaseModel):
    """Body of POST /api/jarvis/parse."""

    text: str = Field(max_length=2000)
