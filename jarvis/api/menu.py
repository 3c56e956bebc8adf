"""Menu API endpoints."""
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from jarvis.core.dependencies import get_menu_repository
from jarvis.services.menu.repository import MenuRepository
from pydantic import BaseModel
from typing import List, Optional


router = APIRouter()
logger = logging.getLogger(__name__)


class MenuItemResponse(BaseModel):
    """Menu item response model."""
    name: str
    price: float
    category: Optional[str] = None
    available: bool = True
    quantity: int = 0
    preparation_time: int = 10
    description: Optional[str] = None

    class Config:
        from_attributes = True


class MenuResponse(BaseModel):
    """Menu response model."""
    items: List[MenuItemResponse]
    categories: List[str] = []

    class Config:
        from_attributes = True


@router.get("/api/menu", response_model=MenuResponse)
async def get_menu(
    request: Request,
    available_only: bool = False,
    menu_repository: MenuRepository = Depends(get_menu_repository),
):
    """Get the menu snapshot the Jarvis matcher works against."""
    logger.info(
        f"[MENU] Request received - available_only: {available_only}, "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )

    try:
        menu = await menu_repository.get_menu()
        items = [item for item in menu.items if item.in_stock] if available_only else menu.items
        logger.info(f"[MENU] Menu loaded - {len(items)} items, {len(menu.categories)} categories")

        return MenuResponse(
            items=[MenuItemResponse.model_validate(item) for item in items],
            categories=menu.categories,
        )

    except Exception as e:
        logger.error(
            f"[MENU] Error fetching menu - Error: {type(e).__name__}: {str(e)}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Error fetching menu: {str(e)}")
