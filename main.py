from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime

from core.logging_config import setup_logging

# Feature routes
from features.tides.routes.tide_routes import router as tide_router
from features.stations.routes.station_routes import router as station_router
from features.conditions.routes.condition_routes import router as condition_router
from features.entrypoints.routes.entrypoint_routes import router as entrypoint_router
from features.entrypoints.registry import SERVICE_DESCRIPTION, SERVICE_VERSION

# Services and clients
from features.common.services.coops_client import CoopsClient
from features.tides.services.tide_service import TideService
from features.stations.services.station_service import StationService
from features.wind.services.wind_service import WindService
from features.conditions.services.condition_service import ConditionService

setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("🌊 Starting Tide Tracker API...")

    client = CoopsClient()
    station_service = StationService(client)
    wind_service = WindService(client)

    app.state.coops_client = client
    app.state.tide_service = TideService(client)
    app.state.station_service = station_service
    app.state.condition_service = ConditionService(
        client=client,
        station_service=station_service,
        wind_service=wind_service
    )

    logger.info("✨ API startup complete - ready to serve requests")
    try:
        yield
    finally:
        logger.info("🔄 Shutting down API...")
        await client.close()
        logger.info("👋 API shutdown complete")

app = FastAPI(
    title="Tide Tracker API",
    description=SERVICE_DESCRIPTION,
    version=SERVICE_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include feature routers
app.include_router(tide_router)
app.include_router(station_router)
app.include_router(condition_router)
app.include_router(entrypoint_router)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "time": datetime.now().isoformat()
    }

if __name__ == "__main__":
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", 3000))

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,
        log_level="info",
        workers=1
    )
