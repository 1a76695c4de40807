"""
RISK FACTOR ENGINE (ENGINE-1)
Map raw client attributes to numeric risk multipliers

RESPONSIBILITIES:
- Age band lookup
- Health lookup with family-history scaling
- Profession keyword matching (first match wins)
- Dependents and lifestyle multipliers

RULES:
❌ No coverage sizing
❌ No I/O, no state between calls
✅ Total function - never raises for profile input
✅ Unknown values fall back to medium-risk defaults
✅ Deterministic output
"""

from typing import Optional

from insurance_advisor.domain.models import ClientProfile, HealthStatus, RiskFactors
from insurance_advisor.domain.services.config_engine import ProfessionRisk, RiskTables
from insurance_advisor.utils.text import normalize_keyword


class RiskFactorEngine:
    """
    Risk Factor Engine
    Resolves multipliers, does NOT size coverages
    """

    def __init__(self, risk_tables: RiskTables):
        """Initialize with loaded risk tables"""
        self.tables = risk_tables

    def resolve(self, profile: ClientProfile) -> RiskFactors:
        """
        Resolve every risk multiplier for a profile

        Args:
            profile: Client profile

        Returns:
            RiskFactors object
        """
        profession = self.profession_risk(profile.profession)

        return RiskFactors(
            age_multiplier=self.age_multiplier(profile.age),
            health_multiplier=self.health_multiplier(
                profile.health_status,
                profile.family_history_serious_illness,
            ),
            profession_multiplier=profession.multiplier,
            profession_category=profession.category,
            dependents_multiplier=self.dependents_multiplier(
                profile.has_dependents,
                profile.effective_dependents_count,
            ),
            lifestyle_multiplier=self.lifestyle_multiplier(
                profile.smoker,
                profile.practices_risk_sport,
            ),
        )

    def age_multiplier(self, age: int) -> float:
        """
        Banded age lookup

        Ages below the first band use the first band; there is no lower
        bound check.
        """
        for band in self.tables.age_bands:
            if band.max_age is None or age <= band.max_age:
                return band.multiplier
        return self.tables.age_bands[-1].multiplier

    def resolve_health(self, health_status: Optional[str]) -> HealthStatus:
        """Unknown or empty status behaves as the configured default"""
        return HealthStatus.resolve(health_status) or self.tables.default_health_status

    def health_multiplier(
        self,
        health_status: Optional[str],
        family_history: bool = False
    ) -> float:
        """Health lookup, scaled when serious illness runs in the family"""
        multiplier = self.tables.health_multipliers[self.resolve_health(health_status)]
        if family_history:
            multiplier *= self.tables.family_history_factor
        return multiplier

    def profession_risk(self, profession: Optional[str]) -> ProfessionRisk:
        """
        Match a free-text profession against the keyword table

        The profession is folded to bare lowercase letters and checked for
        substring containment of each keyword in table order.
        """
        normalized = normalize_keyword(profession or "")
        if normalized:
            for entry in self.tables.professions:
                if entry.keyword in normalized:
                    return entry
        return self.tables.default_profession

    def dependents_multiplier(self, has_dependents: bool, count: int) -> float:
        if not has_dependents:
            return 1.0
        return 1.0 + count * self.tables.per_dependent_factor

    def lifestyle_multiplier(self, smoker: bool, risk_sport: bool) -> float:
        multiplier = 1.0
        if smoker:
            multiplier *= self.tables.smoker_factor
        if risk_sport:
            multiplier *= self.tables.risk_sport_factor
        return multiplier
