from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.routers import boundary
from app.core.config import settings
from app.core.logging_config import logger

app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    redirect_slashes=False
)

# Configure CORS for the map frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Include routers
app.include_router(boundary.router, prefix="/api/polyline", tags=["Polyline"])

logger.info(f"{settings.APP_NAME} started (environment={settings.ENVIRONMENT})")


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT
    }
