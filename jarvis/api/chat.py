"""Chat and Jarvis quick-order endpoints."""
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from jarvis.core.dependencies import chat_policy, get_chat_orchestrator, rate_limit
from jarvis.services.chat.models import ChatReply, ChatRequest, JarvisParseRequest
from jarvis.services.chat.orchestrator import ChatOrchestrator
from jarvis.services.ordering.models import OrderPreview

router = APIRouter()
logger = logging.getLogger(__name__)

CHAT_ERROR_MESSAGE = "Oops! Something went wrong. Please try again! 🙏"


@router.post(
    "/api/chat",
    response_model=ChatReply,
    response_model_exclude_none=True,
    dependencies=[Depends(rate_limit(chat_policy))],
)
async def chat(
    request: Request,
    chat_request: ChatRequest,
    orchestrator: ChatOrchestrator = Depends(get_chat_orchestrator),
):
    """Reply to a chat turn, or confirm an order when asked to place one."""
    logger.info(
        f"[CHAT] Request received - {len(chat_request.messages)} messages, "
        f"action: {chat_request.action or 'none'}, "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )

    try:
        return await orchestrator.reply(
            messages=chat_request.messages,
            user_profile=chat_request.user_profile,
            cart=chat_request.cart,
            action=chat_request.action,
        )
    except Exception as e:
        logger.error(
            f"[CHAT] Error handling chat - Error: {type(e).__name__}: {str(e)}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={"message": CHAT_ERROR_MESSAGE, "provider": "error"},
        )


@router.post(
    "/api/jarvis/parse",
    response_model=OrderPreview,
    dependencies=[Depends(rate_limit(chat_policy))],
)
async def parse_quick_order(
    parse_request: JarvisParseRequest,
    orchestrator: ChatOrchestrator = Depends(get_chat_orchestrator),
):
    """Parse a quick-order line such as "2 samosa aur ek chai" into a priced preview."""
    preview = await orchestrator.preview_order(parse_request.text)
    logger.debug(f"[JARVIS] Preview for '{parse_request.text}': {preview.model_dump()}")
    return preview
