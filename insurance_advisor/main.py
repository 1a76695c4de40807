"""
FastAPI Main Application
Hosts the insurance needs calculation engine
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from insurance_advisor.config import settings
from insurance_advisor.core.logging import get_logger, setup_logging
from insurance_advisor.domain.services.analysis_engine import AnalysisEngine
from insurance_advisor.domain.services.config_engine import ConfigEngine
from insurance_advisor.domain.strategy.actuarial_assumptions import validate_assumptions

# Configure logging
setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


# Global instances
config_engine: ConfigEngine | None = None
analysis_engine: AnalysisEngine | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager
    Loads configuration and builds the engine once at startup
    """
    global config_engine, analysis_engine

    # ===================
    # STARTUP
    # ===================
    logger.info("=" * 60)
    logger.info("🚀 Starting Insurance Needs Advisor")
    logger.info("=" * 60)

    # 1. Load configuration
    logger.info("⚙️  Step 1/2: Loading risk tables from %s", settings.CONFIG_DIR)
    validate_assumptions()
    config_engine = ConfigEngine(settings.CONFIG_DIR)
    config_engine.load_all()
    logger.info("✅ Configuration loaded (version %s)", config_engine.version)

    # 2. Initialize domain engine
    logger.info("🔧 Step 2/2: Initializing analysis engine...")
    analysis_engine = AnalysisEngine(
        risk_tables=config_engine.risk_tables,
        currency_symbol=settings.CURRENCY_SYMBOL,
    )
    logger.info("✅ Analysis engine initialized")
    logger.info("   ✅ API Server: http://%s:%s", settings.API_HOST, settings.API_PORT)
    logger.info("   ✅ API Docs: http://%s:%s/docs", settings.API_HOST, settings.API_PORT)

    yield

    # ===================
    # SHUTDOWN
    # ===================
    analysis_engine = None
    config_engine = None
    logger.info("👋 Insurance Needs Advisor shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Insurance Needs Advisor",
    description="Human Life Value, DIME and Capital Retention based coverage recommendations",
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


# Import and include routers
from insurance_advisor.api.routes import analysis, config as config_routes, health  # noqa: E402

app.include_router(health.router, tags=["Health"])
app.include_router(analysis.router, prefix="/api/v1/analysis", tags=["Analysis"])
app.include_router(config_routes.router, prefix="/api/v1/config", tags=["Config"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("insurance_advisor.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=settings.DEBUG)
