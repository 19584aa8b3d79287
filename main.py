"""
NPL Insights - Cricket League Analytics API
"""
import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from npl_insights.config import settings
from npl_insights.datasets import init_datasets
from npl_insights.loaders import DatasetLoadError
from npl_insights.api.league import router as league_router
from npl_insights.api.players import router as players_router
from npl_insights.api.teams import router as teams_router
from npl_insights.api.matches import router as matches_router
from npl_insights.api.field import router as field_router

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="NPL Insights",
    description="Aggregated player, team and match analytics for the league dashboard",
    version="0.1.0",
)

# CORS origins - configurable via environment variable
default_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

# Add custom origins from environment (comma-separated)
if settings.CORS_ORIGINS:
    default_origins.extend([o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()])

# CORS middleware for the dashboard front end
app.add_middleware(
    CORSMiddleware,
    allow_origins=default_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Include routers
app.include_router(league_router, prefix="/api")
app.include_router(players_router, prefix="/api")
app.include_router(teams_router, prefix="/api")
app.include_router(matches_router, prefix="/api")
app.include_router(field_router, prefix="/api")


@app.on_event("startup")
def startup_event():
    """Load the datasets once; endpoints answer 503 until this succeeds"""
    try:
        init_datasets()
    except DatasetLoadError as e:
        logger.error("Could not load datasets: %s", e)


@app.get("/")
def root():
    """Health check endpoint"""
    return {
        "name": "NPL Insights API",
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/api/health")
def health_check():
    """API health check"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get("PORT", 8000)))
