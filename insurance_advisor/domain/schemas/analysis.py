from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from insurance_advisor.domain.models import (
    ClientAnalysis,
    ClientProfile,
    CoverageRecommendation,
    Dependent,
)


class CamelModel(BaseModel):
    """Accepts and emits camelCase, also accepts snake_case on input"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DependentRequest(CamelModel):
    age: int = Field(..., ge=0, le=30)
    years_until_education_complete: int = Field(..., ge=0, le=25)
    education_type: Optional[str] = Field(None, description="secondary | technical | higher")
    name: Optional[str] = None


class ClientProfileRequest(CamelModel):
    """Client profile submitted for analysis"""
    name: str = Field(..., min_length=1)
    age: int = Field(..., ge=0, le=120)
    gender: str = ""
    profession: str = ""
    monthly_income: float = Field(..., ge=0, description="Monthly income")
    has_dependents: bool = False
    dependents_count: int = Field(0, ge=0)
    dependents_data: List[DependentRequest] = Field(default_factory=list)
    current_debts: float = Field(0.0, ge=0)
    health_status: Optional[str] = Field(None, description="excellent | good | regular | poor")
    existing_insurance: bool = False

    net_worth: Optional[float] = None
    monthly_expenses: Optional[float] = Field(None, ge=0)
    emergency_reserves: Optional[float] = Field(None, ge=0)
    marital_status: Optional[str] = None
    smoker: bool = False
    practices_risk_sport: bool = False
    preexisting_conditions: List[str] = Field(default_factory=list)
    family_history_serious_illness: bool = False
    existing_coverage_types: List[str] = Field(default_factory=list)
    existing_premium: Optional[float] = Field(None, ge=0)
    existing_investments: Optional[float] = Field(None, ge=0)
    partner_broker: Optional[str] = None

    def to_domain(self) -> ClientProfile:
        return ClientProfile(
            name=self.name,
            age=self.age,
            gender=self.gender,
            profession=self.profession,
            monthly_income=self.monthly_income,
            has_dependents=self.has_dependents,
            dependents_count=self.dependents_count,
            dependents_data=tuple(
                Dependent(
                    age=d.age,
                    years_until_education_complete=d.years_until_education_complete,
                    education_type=d.education_type,
                    name=d.name,
                )
                for d in self.dependents_data
            ),
            current_debts=self.current_debts,
            health_status=self.health_status,
            existing_insurance=self.existing_insurance,
            net_worth=self.net_worth,
            monthly_expenses=self.monthly_expenses,
            emergency_reserves=self.emergency_reserves,
            marital_status=self.marital_status,
            smoker=self.smoker,
            practices_risk_sport=self.practices_risk_sport,
            preexisting_conditions=frozenset(self.preexisting_conditions),
            family_history_serious_illness=self.family_history_serious_illness,
            existing_coverage_types=frozenset(self.existing_coverage_types),
            existing_premium=self.existing_premium,
            existing_investments=self.existing_investments,
            partner_broker=self.partner_broker,
        )


class CoverageResponse(CamelModel):
    type: str
    label: str
    amount: int
    justification: str
    priority: str
    risk_factors: List[str]
    calculation_basis: str

    @staticmethod
    def from_domain(coverage: CoverageRecommendation) -> "CoverageResponse":
        return CoverageResponse(
            type=coverage.type.value,
            label=coverage.type.label,
            amount=coverage.amount,
            justification=coverage.justification,
            priority=coverage.priority.value,
            risk_factors=list(coverage.risk_factors),
            calculation_basis=coverage.calculation_basis,
        )


class AnalysisDetailsResponse(CamelModel):
    age_risk: float
    health_risk: float
    profession_risk: float
    dependents_impact: float


class ClientAnalysisResponse(CamelModel):
    """Response with the complete analysis"""
    client_name: str
    risk_profile: str
    total_multiplier: float
    total_recommended_amount: int
    recommended_coverages: List[CoverageResponse]
    summary: str
    analysis_details: AnalysisDetailsResponse

    @staticmethod
    def from_domain(analysis: ClientAnalysis) -> "ClientAnalysisResponse":
        details = analysis.analysis_details
        return ClientAnalysisResponse(
            client_name=analysis.client_name,
            risk_profile=analysis.risk_profile.value,
            total_multiplier=round(analysis.total_multiplier, 4),
            total_recommended_amount=analysis.total_recommended_amount,
            recommended_coverages=[
                CoverageResponse.from_domain(c) for c in analysis.recommended_coverages
            ],
            summary=analysis.summary,
            analysis_details=AnalysisDetailsResponse(
                age_risk=details.age_risk,
                health_risk=details.health_risk,
                profession_risk=details.profession_risk,
                dependents_impact=details.dependents_impact,
            ),
        )


class AnalysisRecordResponse(BaseModel):
    """Storage record handed to the persistence layer (snake_case)"""
    client_name: str
    risk_profile: str
    recommended_coverage: List[Dict[str, Any]]
    justifications: Dict[str, str]
