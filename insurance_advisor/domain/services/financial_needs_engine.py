"""
FINANCIAL NEEDS ENGINE (ENGINE-2)
Size the life/death capital need with three competing methods

RESPONSIBILITIES:
- Human Life Value (HLV): PV of future net disposable income
- DIME: Debts + Income replacement + Mortgage + Education, net of assets
- Capital Retention: capital whose yield replaces income perpetually
- Combine the methods into the life coverage need

RULES:
❌ No risk lookups (multiplier is passed in)
❌ No narrative text
✅ Pure functions of the profile
✅ Money carried as Decimal, multipliers as plain ratios
✅ Unknown optional amounts resolved explicitly (None -> 0)
✅ Deterministic output
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from insurance_advisor.domain.models import ClientProfile, Dependent, EducationType
from insurance_advisor.domain.strategy import actuarial_assumptions as aa
from insurance_advisor.utils.formatting import round_amount, to_decimal

ZERO = Decimal('0')


def _known(value: Optional[Decimal]) -> Decimal:
    """Resolve an optional amount, unknown counts as zero"""
    return ZERO if value is None else to_decimal(value)


def growing_annuity_pv(
    payment: Decimal,
    years: int,
    growth_rate: Decimal = aa.SALARY_GROWTH_RATE,
    discount_rate: Decimal = aa.DISCOUNT_RATE
) -> Decimal:
    """
    Present value of a growing annuity paid at the end of each year

    First payment is `payment`, growing by `growth_rate` every year and
    discounted at `discount_rate`:

        PV = sum(payment * (1+g)^(y-1) / (1+r)^y, y = 1..years)

    Args:
        payment: First-year payment
        years: Number of annual payments
        growth_rate: Annual payment growth
        discount_rate: Annual discount rate

    Returns:
        Present value (0 for a non-positive horizon)
    """
    if years <= 0:
        return ZERO
    payment = to_decimal(payment)
    growth_rate = to_decimal(growth_rate)
    discount_rate = to_decimal(discount_rate)
    if discount_rate == growth_rate:
        return payment * years / (1 + discount_rate)
    ratio = (1 + growth_rate) / (1 + discount_rate)
    return payment * (1 - ratio ** years) / (discount_rate - growth_rate)


@dataclass(frozen=True)
class NeedsBreakdown:
    """Result of the three needs methods for one profile - Immutable"""
    human_life_value: Decimal
    dime: Decimal
    capital_retention: Decimal
    support_years: int
    existing_assets: Decimal
    method: str
    base_need: Decimal


class FinancialNeedsEngine:
    """
    Financial Needs Engine
    Three independent valuation methods plus the combination rule
    """

    METHOD_HLV = "Human Life Value"
    METHOD_DIME = "DIME"
    METHOD_CAPITAL_RETENTION = "Capital Retention"

    # -------------------------------------------------------------------
    # Human Life Value
    # -------------------------------------------------------------------

    def hlv_horizon(self, profile: ClientProfile) -> int:
        """Years until retirement, never below the minimum horizon"""
        return max(aa.RETIREMENT_AGE - profile.age, aa.MIN_HLV_HORIZON_YEARS)

    def human_life_value(self, profile: ClientProfile) -> Decimal:
        """
        Present value of future net disposable income up to retirement

        Each year's income grows with salary growth, loses the flat tax and
        the earner's personal consumption, then is discounted back.
        """
        annual_income = profile.annual_income
        net_share = (1 - aa.INCOME_TAX_RATE) * (1 - aa.PERSONAL_CONSUMPTION_RATE)

        total = ZERO
        for year in range(1, self.hlv_horizon(profile) + 1):
            gross = annual_income * (1 + aa.SALARY_GROWTH_RATE) ** (year - 1)
            total += gross * net_share / (1 + aa.DISCOUNT_RATE) ** year
        return total

    # -------------------------------------------------------------------
    # DIME
    # -------------------------------------------------------------------

    @staticmethod
    def _education_of(dependent: Dependent) -> EducationType:
        return dependent.education or EducationType(aa.DEFAULT_EDUCATION_TYPE)

    def dependent_support_years(self, dependent: Dependent) -> int:
        """Years until a dependent completes education and gets established"""
        establishment = (
            aa.HIGHER_EDUCATION_ESTABLISHMENT_YEARS
            if self._education_of(dependent) == EducationType.HIGHER
            else aa.DEFAULT_ESTABLISHMENT_YEARS
        )
        independent_at = dependent.age_at_education_complete + establishment
        return max(independent_at - dependent.age, aa.MIN_DEPENDENT_SUPPORT_YEARS)

    def income_replacement_years(self, profile: ClientProfile) -> int:
        """
        Years the household needs the earner's income replaced

        Detailed dependent records win over a bare count; a partner without
        dependents is supported until retirement within fixed bounds.
        """
        if profile.has_dependents_data:
            years = max(self.dependent_support_years(d) for d in profile.dependents_data)
            return min(years, aa.MAX_SUPPORT_YEARS)

        if profile.has_dependents:
            reduction = (
                aa.COUNT_ONLY_OLDER_EARNER_REDUCTION
                if profile.age > aa.COUNT_ONLY_OLDER_EARNER_AGE
                else 0
            )
            return max(aa.COUNT_ONLY_SUPPORT_YEARS - reduction, aa.COUNT_ONLY_MIN_SUPPORT_YEARS)

        marital = profile.marital
        if marital is not None and marital.has_partner:
            return min(
                aa.PARTNER_MAX_SUPPORT_YEARS,
                max(aa.RETIREMENT_AGE - profile.age, aa.PARTNER_MIN_SUPPORT_YEARS),
            )

        return 0

    def income_replacement_pv(self, profile: ClientProfile) -> Decimal:
        """Growing annuity on the replacement share of annual income"""
        years = self.income_replacement_years(profile)
        if years == 0:
            return ZERO
        return growing_annuity_pv(
            payment=profile.annual_income * aa.INCOME_REPLACEMENT_RATE,
            years=years,
        )

    def education_costs_pv(self, profile: ClientProfile) -> Decimal:
        """
        Present value of dependents' education

        Per dependent: base cost inflated at education inflation and
        discounted at the discount rate over the years until completion.
        With only a dependents count, a coarse undiscounted estimate is used.
        """
        if profile.has_dependents_data:
            total = ZERO
            for dependent in profile.dependents_data:
                years = dependent.years_until_education_complete
                base_cost = aa.EDUCATION_BASE_COSTS[self._education_of(dependent).value]
                future_cost = base_cost * (1 + aa.EDUCATION_INFLATION_RATE) ** years
                total += future_cost / (1 + aa.DISCOUNT_RATE) ** years
            return total

        if profile.has_dependents:
            return (
                profile.dependents_count
                * aa.FALLBACK_EDUCATION_COST_PER_DEPENDENT
                * (1 + aa.EDUCATION_INFLATION_RATE) ** aa.FALLBACK_EDUCATION_YEARS
            )

        return ZERO

    def existing_insurance_offset(self, profile: ClientProfile) -> Decimal:
        """Current monthly premium treated as 10 years of equivalent coverage"""
        if not profile.existing_insurance:
            return ZERO
        return _known(profile.existing_premium) * aa.EXISTING_PREMIUM_COVERAGE_MONTHS

    def dime(self, profile: ClientProfile) -> Decimal:
        """Debts + Income + Mortgage + Education, net of assets, floored at 0"""
        gross_need = (
            profile.current_debts
            + self.income_replacement_pv(profile)
            + aa.MORTGAGE_BALANCE
            + self.education_costs_pv(profile)
        )
        existing_assets = (
            _known(profile.existing_investments)
            + _known(profile.emergency_reserves)
        )
        return max(gross_need - existing_assets - self.existing_insurance_offset(profile), ZERO)

    # -------------------------------------------------------------------
    # Capital Retention
    # -------------------------------------------------------------------

    def capital_retention(self, profile: ClientProfile) -> Decimal:
        """
        Capital whose perpetual yield replaces the target income

        Known monthly expenses add their own perpetuity; otherwise a flat
        share of the base capital is added.
        """
        base = profile.annual_income * aa.INCOME_REPLACEMENT_RATE / aa.CAPITAL_YIELD_RATE
        if profile.monthly_expenses is not None:
            adjustment = (
                profile.monthly_expenses * 12 * aa.LIFESTYLE_EXPENSE_SHARE
            ) / aa.CAPITAL_YIELD_RATE
        else:
            adjustment = base * aa.DEFAULT_LIFESTYLE_ADJUSTMENT
        return base + adjustment

    # -------------------------------------------------------------------
    # Combination rule
    # -------------------------------------------------------------------

    def existing_liquid_assets(self, profile: ClientProfile) -> Decimal:
        """Investments plus the liquid share of emergency reserves"""
        return (
            _known(profile.existing_investments)
            + _known(profile.emergency_reserves) * aa.LIQUID_RESERVE_SHARE
        )

    def breakdown(self, profile: ClientProfile) -> NeedsBreakdown:
        """
        Run all three methods and pick the dominant one

        Ties resolve in the order HLV, DIME, Capital Retention.
        """
        hlv = self.human_life_value(profile)
        dime = self.dime(profile)
        capital = self.capital_retention(profile)

        candidates = (
            (self.METHOD_HLV, aa.HLV_WEIGHT * hlv),
            (self.METHOD_DIME, dime),
            (self.METHOD_CAPITAL_RETENTION, capital),
        )
        method, base_need = candidates[0]
        for name, value in candidates[1:]:
            if value > base_need:
                method, base_need = name, value

        return NeedsBreakdown(
            human_life_value=hlv,
            dime=dime,
            capital_retention=capital,
            support_years=self.income_replacement_years(profile),
            existing_assets=self.existing_liquid_assets(profile),
            method=method,
            base_need=base_need,
        )

    def life_need(self, profile: ClientProfile, total_multiplier: float) -> int:
        """
        Death/Life coverage amount

        max(0.8 x HLV, DIME, Capital Retention) scaled by the total risk
        multiplier, less existing liquid assets, rounded, and never below
        the minimum death coverage.
        """
        return self.life_amount(self.breakdown(profile), total_multiplier)

    @staticmethod
    def life_amount(breakdown: NeedsBreakdown, total_multiplier: float) -> int:
        raw = breakdown.base_need * to_decimal(total_multiplier) - breakdown.existing_assets
        return round_amount(max(raw, aa.MIN_DEATH_COVERAGE))
