"""Admin authentication endpoint."""
import logging
import secrets
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from jarvis.core.config import Settings
from jarvis.core.dependencies import admin_login_policy, get_settings, rate_limit

router = APIRouter()
logger = logging.getLogger(__name__)


class AdminLoginRequest(BaseModel):
    """Admin login request model."""
    username: str
    password: str


def credentials_match(supplied: str, expected: str) -> bool:
    """Constant-time string comparison."""
    return secrets.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


@router.post(
    "/api/admin/auth",
    dependencies=[Depends(rate_limit(admin_login_policy))],
)
async def admin_login(
    login_req: AdminLoginRequest,
    config: Settings = Depends(get_settings),
):
    """Check admin credentials. Issuing a session token is left to the auth service."""
    if not config.admin_username or not config.admin_password:
        logger.error("[ADMIN AUTH] ADMIN_USERNAME or ADMIN_PASSWORD not configured")
        raise HTTPException(status_code=500, detail="Server configuration error")

    username_ok = credentials_match(login_req.username, config.admin_username)
    password_ok = credentials_match(login_req.password, config.admin_password)
    if not (username_ok and password_ok):
        logger.warning(f"[ADMIN AUTH] Invalid credentials for '{login_req.username}'")
        raise HTTPException(status_code=401, detail="Invalid credentials")

    logger.info(f"[ADMIN AUTH] Admin '{login_req.username}' authenticated")
    return {"success": True, "username": login_req.username}
