"""Main FastAPI application."""
from fastapi import FastAPI
from contextlib import asynccontextmanager

from jarvis.core.config import settings, warn_on_placeholder_values
from jarvis.core.logging import setup_logging
from jarvis.api import admin, chat, health, menu
from jarvis.services.ratelimit.limiter import RateLimiter, RateLimitStore
from jarvis.services.ratelimit.sweeper import RateLimitSweeper


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging()
    warn_on_placeholder_values(settings)
    sweeper = RateLimitSweeper(
        limiter=app.state.rate_limiter,
        interval_seconds=settings.rate_limit_sweep_interval_seconds,
        horizon_ms=settings.rate_limit_cleanup_horizon_ms,
    )
    sweeper.start()
    app.state.rate_limit_sweeper = sweeper
    yield
    # Shutdown
    await sweeper.stop()


app = FastAPI(
    title="Jarvis Canteen Assistant",
    description="Natural-language ordering and chat for the college canteen",
    version="0.1.0",
    lifespan=lifespan,
)

# One store for every rate-limited route, lives as long as the process
app.state.rate_limiter = RateLimiter(store=RateLimitStore())

app.include_router(health.router, tags=["health"])
app.include_router(menu.router, tags=["menu"])
app.include_router(chat.router, tags=["chat"])
app.include_router(admin.router, tags=["admin"])


@app.get("/")
async def root():
    """Service info."""
    return {
        "message": "Jarvis Canteen Assistant API",
        "version": "0.1.0",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("jarvis.main:app", host=settings.host, port=settings.port)
