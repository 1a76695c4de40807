"""
Configuration API Routes
Expose the loaded risk tables
"""

from typing import List

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

router = APIRouter()


# Response models
class ProfessionRiskInfo(BaseModel):
    keyword: str
    multiplier: float
    category: str


class AgeBandInfo(BaseModel):
    label: str
    max_age: int | None = None
    multiplier: float


class RiskProfileInfo(BaseModel):
    min_multiplier: float
    label: str


class RiskTablesInfo(BaseModel):
    version: str
    age_bands: List[AgeBandInfo]
    health_multipliers: dict[str, float]
    professions: List[ProfessionRiskInfo]
    default_profession: ProfessionRiskInfo
    risk_profiles: List[RiskProfileInfo]
    fallback_risk_profile: str


@router.get("/risk-tables", response_model=RiskTablesInfo)
async def get_risk_tables():
    """
    Get the risk tables in matching order
    """
    from insurance_advisor.main import config_engine

    if config_engine is None:
        raise HTTPException(status_code=500, detail="Configuration not loaded")

    tables = config_engine.risk_tables
    return RiskTablesInfo(
        version=tables.version,
        age_bands=[
            AgeBandInfo(label=b.label, max_age=b.max_age, multiplier=b.multiplier)
            for b in tables.age_bands
        ],
        health_multipliers={s.value: m for s, m in tables.health_multipliers.items()},
        professions=[
            ProfessionRiskInfo(keyword=p.keyword, multiplier=p.multiplier, category=p.category)
            for p in tables.professions
        ],
        default_profession=ProfessionRiskInfo(
            keyword=tables.default_profession.keyword,
            multiplier=tables.default_profession.multiplier,
            category=tables.default_profession.category,
        ),
        risk_profiles=[
            RiskProfileInfo(min_multiplier=t.min_multiplier, label=t.profile.value)
            for t in tables.risk_profiles
        ],
        fallback_risk_profile=tables.fallback_risk_profile.value,
    )
