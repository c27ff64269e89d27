"""Main FastAPI application."""
from fastapi import FastAPI
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.logging import setup_logging
from app.api import analytics, cart, chat, health, menu, orders, session, stock


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging()
    yield
    # Shutdown
    pass


app = FastAPI(
    title="Restaurant Ordering",
    description="Menu, cart, order and stock management for a restaurant",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router, tags=["health"])
app.include_router(session.router, tags=["session"])
app.include_router(menu.router, tags=["menu"])
app.include_router(cart.router, tags=["cart"])
app.include_router(orders.router, tags=["orders"])
app.include_router(stock.router, tags=["stock"])
app.include_router(analytics.router, tags=["analytics"])
app.include_router(chat.router, tags=["chat"])


@app.get("/")
async def root():
    """API information."""
    return {
        "message": f"{settings.restaurant_name} Ordering API",
        "version": "0.1.0",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port)
