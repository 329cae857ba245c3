from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
import uvicorn

# Import routers
from touristid.api.routes import health, register, tourists, checkins, reports, sos, stats
from touristid.core.config import settings
from touristid.core.logging import setup_logging
from touristid.services.store import create_store

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for startup and shutdown"""
    # Startup
    logger.info("🚀 Starting Smart Tourist Digital ID service...")

    # Fresh in-memory collections for this process
    app.state.store = create_store(settings)

    yield

    # Shutdown
    logger.info(f"👋 Shutting down, discarding {app.state.store.sizes()}")

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Prototype - Tourist Digital IDs, check-ins, e-FIRs and SOS alerts, held in memory",
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
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

# Include routers
app.include_router(health.router, prefix=settings.API_PREFIX, tags=["Health"])
app.include_router(register.router, prefix=settings.API_PREFIX, tags=["Registration"])
app.include_router(tourists.router, prefix=settings.API_PREFIX, tags=["Digital IDs"])
app.include_router(checkins.router, prefix=settings.API_PREFIX, tags=["Check-ins"])
app.include_router(reports.router, prefix=settings.API_PREFIX, tags=["e-FIR"])
app.include_router(sos.router, prefix=settings.API_PREFIX, tags=["SOS"])
app.include_router(stats.router, prefix=settings.API_PREFIX, tags=["Stats"])

@app.get("/")
async def root():
    """Root endpoint with API information"""
    return {
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "operational",
        "docs": "/docs",
        "endpoints": {
            "health": "/api/health",
            "register": "/api/register",
            "tourists": "/api/tourists",
            "checkins": "/api/checkins",
            "reports": "/api/reports",
            "sos": "/api/sos",
            "stats": "/api/stats"
        },
        "privacy_note": "Nothing is persisted - all records are lost when the process stops"
    }

def run():
    uvicorn.run(app, host="0.0.0.0", port=8000, reload=False)

if __name__ == "__main__":
    run()
