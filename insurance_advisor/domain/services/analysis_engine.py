"""
ANALYSIS ENGINE (ENGINE-4) - CORE ORCHESTRATOR
Client profile -> complete insurance needs analysis

RESPONSIBILITIES:
- Orchestrate risk, needs and coverage engines
- Apply the life coverage eligibility override
- Classify the overall risk profile
- Attach the narrative summary

RULES:
❌ No persistence
❌ No caching across profiles
❌ No state mutation
✅ Idempotent
✅ Never raises for profile input
✅ Always explain
"""

import logging
from typing import List

from insurance_advisor.domain.models import (
    AnalysisDetails,
    ClientAnalysis,
    ClientProfile,
    CoverageRecommendation,
    CoverageType,
    RiskProfile,
)
from insurance_advisor.domain.services.config_engine import RiskTables
from insurance_advisor.domain.services.coverage_engine import CoverageEngine
from insurance_advisor.domain.services.financial_needs_engine import FinancialNeedsEngine
from insurance_advisor.domain.services.risk_factor_engine import RiskFactorEngine
from insurance_advisor.domain.strategy import actuarial_assumptions as aa
from insurance_advisor.reports.analysis_summary import build_summary
from insurance_advisor.utils.formatting import DEFAULT_CURRENCY_SYMBOL

logger = logging.getLogger(__name__)


class AnalysisEngine:
    """
    Analysis Engine - The Brain
    Orchestrates all engines to produce one ClientAnalysis per profile
    """

    def __init__(
        self,
        risk_tables: RiskTables,
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    ):
        """
        Initialize analysis engine

        Args:
            risk_tables: Loaded risk tables (see ConfigEngine)
            currency_symbol: Symbol used in narrative text
        """
        self.risk_tables = risk_tables
        self.currency_symbol = currency_symbol
        self.risk_factor_engine = RiskFactorEngine(risk_tables)
        self.needs_engine = FinancialNeedsEngine()
        self.coverage_engine = CoverageEngine(self.needs_engine, currency_symbol)

    def calculate(self, profile: ClientProfile) -> ClientAnalysis:
        """
        Produce the complete analysis for a client

        Args:
            profile: Validated client profile

        Returns:
            ClientAnalysis object
        """
        # Step 1: Resolve risk factors
        risk_factors = self.risk_factor_engine.resolve(profile)
        health = self.risk_factor_engine.resolve_health(profile.health_status)

        # Step 2: Size every product
        coverages = self.coverage_engine.calculate_all(profile, risk_factors, health)

        # Step 3: Eligibility override
        coverages = self.apply_eligibility(profile, coverages)

        # Step 4: Classify
        total_multiplier = risk_factors.total_multiplier
        risk_profile = self.classify(total_multiplier)

        # Step 5: Explain
        summary = build_summary(profile, risk_factors, coverages, self.currency_symbol)

        logger.debug(
            "Analysis complete: multiplier=%.2f profile=%s coverages=%d",
            total_multiplier,
            risk_profile.value,
            len(coverages),
        )

        return ClientAnalysis(
            client_name=profile.name,
            risk_profile=risk_profile,
            recommended_coverages=tuple(coverages),
            summary=summary,
            analysis_details=AnalysisDetails.from_risk_factors(risk_factors),
            total_multiplier=total_multiplier,
        )

    @staticmethod
    def is_life_eligible(profile: ClientProfile) -> bool:
        """Young clients without dependents get no life coverage"""
        return profile.age >= aa.LIFE_ELIGIBILITY_MIN_AGE or profile.has_dependents

    def apply_eligibility(
        self,
        profile: ClientProfile,
        coverages: List[CoverageRecommendation]
    ) -> List[CoverageRecommendation]:
        if self.is_life_eligible(profile):
            return coverages
        return [c for c in coverages if c.type != CoverageType.DEATH]

    def classify(self, total_multiplier: float) -> RiskProfile:
        """
        Classify overall risk from the total multiplier

        Thresholds are checked top-down, inclusive:
        >= 3.5 High Risk, >= 2.0 Elevated Risk, >= 1.5 Medium Risk,
        otherwise Adequate Profile.
        """
        for threshold in self.risk_tables.risk_profiles:
            if total_multiplier >= threshold.min_multiplier:
                return threshold.profile
        return self.risk_tables.fallback_risk_profile
