"""
Domain Models Package
Export all domain entities
"""

from .entities import (
    # Enums
    CoverageType,
    EducationType,
    HealthStatus,
    MaritalStatus,
    Priority,
    RiskProfile,

    # Entities
    AnalysisDetails,
    ClientAnalysis,
    ClientProfile,
    CoverageRecommendation,
    Dependent,
    RiskFactors,
)

__all__ = [
    # Enums
    "CoverageType",
    "EducationType",
    "HealthStatus",
    "MaritalStatus",
    "Priority",
    "RiskProfile",

    # Entities
    "AnalysisDetails",
    "ClientAnalysis",
    "ClientProfile",
    "CoverageRecommendation",
    "Dependent",
    "RiskFactors",
]
