"""
COVERAGE ENGINE (ENGINE-3)
Turn needs and risk factors into per-product recommendations

RESPONSIBILITIES:
- Death/Life, Disability (IPTA), Critical Illness, Daily Incapacity (DIT), Funeral
- Priority, justification, risk-factor list and calculation basis per product

RULES:
❌ No risk lookups (RiskFactors passed in)
❌ No eligibility filtering (aggregator decides)
✅ Amounts rounded to whole currency units, never negative
✅ Deterministic output
"""

from decimal import Decimal
from typing import List

from insurance_advisor.domain.models import (
    ClientProfile,
    CoverageRecommendation,
    CoverageType,
    HealthStatus,
    Priority,
    RiskFactors,
)
from insurance_advisor.domain.services.financial_needs_engine import FinancialNeedsEngine
from insurance_advisor.domain.strategy import actuarial_assumptions as aa
from insurance_advisor.utils.formatting import (
    DEFAULT_CURRENCY_SYMBOL,
    format_currency,
    format_multiplier,
    round_amount,
    to_decimal,
)


class CoverageEngine:
    """
    Coverage Engine
    One calculator per insurance product
    """

    def __init__(
        self,
        needs_engine: FinancialNeedsEngine,
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    ):
        """
        Initialize coverage engine

        Args:
            needs_engine: Financial needs methods used for the life amount
            currency_symbol: Symbol used in justification text
        """
        self.needs_engine = needs_engine
        self.currency_symbol = currency_symbol

    def _money(self, value: Decimal) -> str:
        return format_currency(value, self.currency_symbol)

    @staticmethod
    def _amount(value: Decimal) -> int:
        return max(round_amount(value), 0)

    def calculate_all(
        self,
        profile: ClientProfile,
        risk_factors: RiskFactors,
        health: HealthStatus
    ) -> List[CoverageRecommendation]:
        """
        Calculate every product in display order

        Args:
            profile: Client profile
            risk_factors: Resolved risk factors
            health: Resolved health status (unknown already defaulted)

        Returns:
            Death, Disability, Critical Illness, Daily Incapacity, Funeral
        """
        return [
            self.death(profile, risk_factors, health),
            self.disability(profile, risk_factors),
            self.critical_illness(profile, health),
            self.daily_incapacity(profile),
            self.funeral(profile),
        ]

    def death(
        self,
        profile: ClientProfile,
        risk_factors: RiskFactors,
        health: HealthStatus
    ) -> CoverageRecommendation:
        """Death/Life coverage from the combined needs methods"""
        breakdown = self.needs_engine.breakdown(profile)
        amount = self.needs_engine.life_amount(breakdown, risk_factors.total_multiplier)

        dependents_count = profile.effective_dependents_count
        risk_list = [
            f"Age {profile.age}",
            f"Health {health.value}",
            risk_factors.profession_category,
            f"{dependents_count} dependent(s)" if profile.has_dependents else "No dependents",
        ]
        if profile.smoker:
            risk_list.append("Smoker")
        if profile.practices_risk_sport:
            risk_list.append("Risk sports")
        if profile.family_history_serious_illness:
            risk_list.append("Family history")

        justification = (
            f"Sized with the {breakdown.method} method, the largest of Human Life Value "
            f"(80%), DIME and Capital Retention, on an annual income of "
            f"{self._money(profile.annual_income)}"
        )
        if breakdown.support_years > 0:
            justification += f" and {breakdown.support_years} years of family support"
        justification += ". "
        if profile.current_debts > 0:
            justification += f"Includes payoff of current debts ({self._money(profile.current_debts)}), "
        else:
            justification += "Includes "
        justification += (
            "dependents' education costs. " if profile.has_dependents
            else "a reserve for future expenses. "
        )
        justification += (
            f"The need was adjusted by the total risk multiplier of "
            f"{format_multiplier(risk_factors.total_multiplier)}."
        )
        if breakdown.existing_assets > 0:
            justification += (
                f" Existing investments and reserves of "
                f"{self._money(breakdown.existing_assets)} were deducted."
            )

        return CoverageRecommendation(
            type=CoverageType.DEATH,
            amount=amount,
            justification=justification,
            priority=Priority.HIGH,
            risk_factors=tuple(risk_list),
            calculation_basis=f"{breakdown.method} x risk multiplier",
        )

    def disability(
        self,
        profile: ClientProfile,
        risk_factors: RiskFactors
    ) -> CoverageRecommendation:
        """Permanent total disability: 75% of the life base plus adaptation costs"""
        life_base = profile.monthly_income * aa.LIFE_BASE_MONTHS
        disability_amount = life_base * aa.DISABILITY_LIFE_SHARE * to_decimal(risk_factors.total_multiplier)
        adaptation_costs = profile.monthly_income * aa.DISABILITY_ADAPTATION_MONTHS

        return CoverageRecommendation(
            type=CoverageType.DISABILITY,
            amount=self._amount(disability_amount + adaptation_costs),
            justification=(
                "Calculated as 75% of the life coverage base plus adaptation costs. "
                f"As a {(profile.profession or 'professional').lower()}, the specific occupational risks "
                "were assessed. The coverage includes resources for necessary "
                "lifestyle changes and for maintaining quality of life."
            ),
            priority=Priority.HIGH,
            risk_factors=(
                f"Profession: {risk_factors.profession_category}",
                f"Age {profile.age}",
                "Physical demands of the profession",
            ),
            calculation_basis="75% of life base + adaptation",
        )

    def critical_illness_priority(self, profile: ClientProfile, health: HealthStatus) -> Priority:
        if (
            health in (HealthStatus.REGULAR, HealthStatus.POOR)
            or profile.family_history_serious_illness
            or profile.smoker
            or profile.age > aa.CRITICAL_ILLNESS_HIGH_PRIORITY_AGE
        ):
            return Priority.HIGH
        return Priority.MEDIUM

    def critical_illness(
        self,
        profile: ClientProfile,
        health: HealthStatus
    ) -> CoverageRecommendation:
        """Income during treatment plus a medical-expense floor"""
        monthly_expenses = (
            profile.monthly_expenses
            if profile.monthly_expenses is not None
            else profile.monthly_income * aa.CRITICAL_ILLNESS_EXPENSE_PROXY
        )
        treatment_costs = monthly_expenses * aa.CRITICAL_ILLNESS_TREATMENT_MONTHS
        medical_expenses = max(
            aa.CRITICAL_ILLNESS_MEDICAL_FLOOR,
            profile.monthly_income * aa.CRITICAL_ILLNESS_MEDICAL_INCOME_MONTHS,
        )

        risk_list = [f"Health status: {health.value}", f"Age {profile.age}"]
        if profile.family_history_serious_illness:
            risk_list.append("Family history of serious illness")
        if profile.smoker:
            risk_list.append("Smoker - high cardiovascular risk")
        risk_list.append("Specialised treatment costs")

        justification = (
            f"Covers 24 months of monthly expenses ({self._money(monthly_expenses)}) "
            "during treatment, plus medical expenses not covered by health plans. "
        )
        if profile.family_history_serious_illness:
            justification += "With a family history of serious illness, this protection is essential. "
        if profile.smoker:
            justification += "As a smoker, the risk of cardiovascular disease and cancer is significantly higher. "
        justification += "This coverage provides financial peace of mind during critical moments."

        return CoverageRecommendation(
            type=CoverageType.CRITICAL_ILLNESS,
            amount=self._amount(treatment_costs + medical_expenses),
            justification=justification,
            priority=self.critical_illness_priority(profile, health),
            risk_factors=tuple(risk_list),
            calculation_basis="24 months expenses + treatment",
        )

    def daily_incapacity(self, profile: ClientProfile) -> CoverageRecommendation:
        """80% of daily income for a fixed 365-day benefit period"""
        daily_income = profile.monthly_income / aa.DIT_DAYS_PER_MONTH
        daily_benefit = daily_income * aa.DIT_INCOME_SHARE

        return CoverageRecommendation(
            type=CoverageType.DAILY_INCAPACITY,
            amount=self._amount(daily_benefit * aa.DIT_BENEFIT_DAYS),
            justification=(
                f"Guarantees 80% of your daily income ({self._money(daily_benefit)}) "
                "during temporary leave due to illness or accident, for up to 365 days. "
                "Keeps finances stable during recovery."
            ),
            priority=Priority.MEDIUM,
            risk_factors=(
                f"Daily income: {self._money(daily_income)}",
                "Coverage for up to 365 days",
                "80% of daily income",
            ),
            calculation_basis="80% daily income x 365 days",
        )

    def funeral(self, profile: ClientProfile) -> CoverageRecommendation:
        """Fixed base plus a capped lifestyle adjustment"""
        adjustment = min(
            profile.monthly_income * aa.FUNERAL_INCOME_SHARE,
            aa.FUNERAL_MAX_ADJUSTMENT,
        )

        return CoverageRecommendation(
            type=CoverageType.FUNERAL,
            amount=self._amount(aa.FUNERAL_BASE_AMOUNT + adjustment),
            justification=(
                "Covers funeral and burial expenses, adjusted to the family's "
                "standard of living. Avoids unexpected costs at a sensitive time."
            ),
            priority=Priority.LOW,
            risk_factors=("Fixed amount adjusted to income",),
            calculation_basis="Fixed amount + lifestyle adjustment",
        )
