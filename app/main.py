"""
FastAPI Main Application
Restaurant deal windows: active deals and peak deal times
"""

from contextlib import asynccontextmanager
import logging
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.core.logging import setup_logging
from app.infrastructure.restaurant_data.provider_factory import get_restaurant_data_provider
from app.services.restaurant_deal_service import RestaurantDealService

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager
    Builds the data provider and deal service
    """
    logger.info("=" * 60)
    logger.info("🚀 Starting Restaurant Deals service")
    logger.info("=" * 60)

    provider = get_restaurant_data_provider(settings)
    app.state.deal_service = RestaurantDealService(provider)
    logger.info("✅ Restaurant data source: %s", settings.RESTAURANT_DATA_URL)
    logger.info("   ✅ API Server: http://%s:%s", settings.API_HOST, settings.API_PORT)
    logger.info("   ✅ API Docs: http://%s:%s/docs", settings.API_HOST, settings.API_PORT)

    yield

    app.state.deal_service = None
    logger.info("👋 Restaurant Deals service shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Restaurant Deals",
    description="Active restaurant deals by time of day and peak deal times",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "🍽️ Restaurant Deals",
        "version": "1.0.0",
        "endpoints": {
            "active": "/api/v1/restaurants/deals/active?timeOfDay=6:30PM",
            "peak_times": "/api/v1/restaurants/deals/peak-times",
        },
        "docs": "/docs"
    }


# Import and include routers
from app.api.routes import deals, health

app.include_router(health.router, tags=["Health"])
app.include_router(deals.router, prefix="/api/v1/restaurants/deals", tags=["Deals"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=settings.DEBUG)
