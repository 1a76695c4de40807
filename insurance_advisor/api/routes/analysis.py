"""
Analysis API Routes
Run the insurance needs engine for a submitted client profile

Each request is calculated independently; results are never cached
across profiles.
"""

import logging

from fastapi import APIRouter, HTTPException

from insurance_advisor.domain.schemas.analysis import (
    AnalysisRecordResponse,
    ClientAnalysisResponse,
    ClientProfileRequest,
)
from insurance_advisor.domain.services.analysis_engine import AnalysisEngine

logger = logging.getLogger(__name__)
router = APIRouter()


def _get_engine() -> AnalysisEngine:
    from insurance_advisor.main import analysis_engine

    if analysis_engine is None:
        raise HTTPException(status_code=503, detail="Analysis engine not initialized")
    return analysis_engine


@router.post("", response_model=ClientAnalysisResponse)
async def create_analysis(request: ClientProfileRequest):
    """
    Calculate recommended coverages for a client

    Returns the risk profile, the prioritized coverages and the summary
    """
    engine = _get_engine()
    analysis = engine.calculate(request.to_domain())

    logger.info(
        "Analysis calculated: risk_profile=%s coverages=%d",
        analysis.risk_profile.value,
        len(analysis.recommended_coverages),
    )
    return ClientAnalysisResponse.from_domain(analysis)


@router.post("/record", response_model=AnalysisRecordResponse)
async def create_analysis_record(request: ClientProfileRequest):
    """
    Calculate and return the storage record for the persistence layer
    """
    engine = _get_engine()
    analysis = engine.calculate(request.to_domain())
    return analysis.to_record()
