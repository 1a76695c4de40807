from fastapi import APIRouter

router = APIRouter()

SERVICE_NAME = "Insurance Needs Advisor"
SERVICE_VERSION = "1.0.0"


@router.get("/health")
async def health():
    """Liveness plus risk table status"""
    from insurance_advisor.main import config_engine, analysis_engine

    tables_loaded = config_engine is not None
    return {
        "status": "healthy" if analysis_engine is not None else "degraded",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "risk_tables": config_engine.version if tables_loaded else "Not loaded",
        "services": {
            "api": "running",
            "analysis_engine": "ready" if analysis_engine is not None else "not_initialized",
        },
    }


@router.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "methods": ["Human Life Value", "DIME", "Capital Retention"],
        "docs": "/docs",
    }
