"""
ACTUARIAL ASSUMPTIONS — MODULE A1

Fixed economic and product assumptions used by the financial needs methods
and the coverage calculators. These are illustrative, deterministic
constants rather than calibrated actuarial tables.

Profile-driven risk multipliers live in config/risk_tables.yml; this module
holds only the rates and amounts that every calculation shares.
"""

from decimal import Decimal

# -------------------------------------------------------------------
# Economic rates
# -------------------------------------------------------------------

DISCOUNT_RATE = Decimal('0.04')
SALARY_GROWTH_RATE = Decimal('0.02')
EDUCATION_INFLATION_RATE = Decimal('0.06')

# -------------------------------------------------------------------
# Human Life Value
# -------------------------------------------------------------------

RETIREMENT_AGE = 65
MIN_HLV_HORIZON_YEARS = 5
INCOME_TAX_RATE = Decimal('0.25')
PERSONAL_CONSUMPTION_RATE = Decimal('0.30')

# -------------------------------------------------------------------
# DIME
# -------------------------------------------------------------------

INCOME_REPLACEMENT_RATE = Decimal('0.70')
MAX_SUPPORT_YEARS = 25
MIN_DEPENDENT_SUPPORT_YEARS = 5
HIGHER_EDUCATION_ESTABLISHMENT_YEARS = 3
DEFAULT_ESTABLISHMENT_YEARS = 2

# Count-only dependents: 18 years, 3 fewer past age 40, never below 10
COUNT_ONLY_SUPPORT_YEARS = 18
COUNT_ONLY_OLDER_EARNER_AGE = 40
COUNT_ONLY_OLDER_EARNER_REDUCTION = 3
COUNT_ONLY_MIN_SUPPORT_YEARS = 10

# Partner without dependents: until retirement, between 5 and 15 years
PARTNER_MAX_SUPPORT_YEARS = 15
PARTNER_MIN_SUPPORT_YEARS = 5

EDUCATION_BASE_COSTS = {
    "secondary": Decimal('25000'),
    "technical": Decimal('35000'),
    "higher": Decimal('120000'),
}
# Dependent records without a recognised education type
DEFAULT_EDUCATION_TYPE = "higher"

FALLBACK_EDUCATION_COST_PER_DEPENDENT = Decimal('120000')
FALLBACK_EDUCATION_YEARS = 8

# Monthly premium treated as 10 years of equivalent coverage
EXISTING_PREMIUM_COVERAGE_MONTHS = 120

# Placeholder: no mortgage field exists on the profile
MORTGAGE_BALANCE = Decimal('0')

# -------------------------------------------------------------------
# Capital Retention
# -------------------------------------------------------------------

CAPITAL_YIELD_RATE = Decimal('0.04')
LIFESTYLE_EXPENSE_SHARE = Decimal('0.80')
DEFAULT_LIFESTYLE_ADJUSTMENT = Decimal('0.20')

# -------------------------------------------------------------------
# Death / Life combination rule
# -------------------------------------------------------------------

HLV_WEIGHT = Decimal('0.80')
LIQUID_RESERVE_SHARE = Decimal('0.80')
MIN_DEATH_COVERAGE = Decimal('100000')

# -------------------------------------------------------------------
# Coverage calculators
# -------------------------------------------------------------------

LIFE_BASE_MONTHS = 120
DISABILITY_LIFE_SHARE = Decimal('0.75')
DISABILITY_ADAPTATION_MONTHS = 24

CRITICAL_ILLNESS_TREATMENT_MONTHS = 24
CRITICAL_ILLNESS_EXPENSE_PROXY = Decimal('0.70')
CRITICAL_ILLNESS_MEDICAL_FLOOR = Decimal('80000')
CRITICAL_ILLNESS_MEDICAL_INCOME_MONTHS = 8
CRITICAL_ILLNESS_HIGH_PRIORITY_AGE = 45

DIT_INCOME_SHARE = Decimal('0.80')
DIT_DAYS_PER_MONTH = 30
DIT_BENEFIT_DAYS = 365

FUNERAL_BASE_AMOUNT = Decimal('15000')
FUNERAL_INCOME_SHARE = Decimal('0.30')
FUNERAL_MAX_ADJUSTMENT = Decimal('15000')

# Death coverage is dropped below this age when there are no dependents
LIFE_ELIGIBILITY_MIN_AGE = 25


# -------------------------------------------------------------------
# Validation Helper
# -------------------------------------------------------------------

def validate_assumptions() -> None:
    """
    Validates the actuarial assumptions.

    Rules enforced:
    - Discount rate must exceed salary growth (finite growing annuity)
    - Shares and rates must lie within [0, 1]
    - Every education type has a non-negative base cost

    Raises:
        ValueError: If any rule is violated
    """
    if DISCOUNT_RATE <= SALARY_GROWTH_RATE:
        raise ValueError("Discount rate must exceed salary growth rate")

    if CAPITAL_YIELD_RATE <= 0:
        raise ValueError("Capital yield rate must be positive")

    shares = {
        "INCOME_TAX_RATE": INCOME_TAX_RATE,
        "PERSONAL_CONSUMPTION_RATE": PERSONAL_CONSUMPTION_RATE,
        "INCOME_REPLACEMENT_RATE": INCOME_REPLACEMENT_RATE,
        "LIFESTYLE_EXPENSE_SHARE": LIFESTYLE_EXPENSE_SHARE,
        "DEFAULT_LIFESTYLE_ADJUSTMENT": DEFAULT_LIFESTYLE_ADJUSTMENT,
        "HLV_WEIGHT": HLV_WEIGHT,
        "LIQUID_RESERVE_SHARE": LIQUID_RESERVE_SHARE,
        "DISABILITY_LIFE_SHARE": DISABILITY_LIFE_SHARE,
        "CRITICAL_ILLNESS_EXPENSE_PROXY": CRITICAL_ILLNESS_EXPENSE_PROXY,
        "DIT_INCOME_SHARE": DIT_INCOME_SHARE,
        "FUNERAL_INCOME_SHARE": FUNERAL_INCOME_SHARE,
    }
    for name, value in shares.items():
        if not Decimal('0') <= value <= Decimal('1'):
            raise ValueError(f"{name} must be between 0 and 1")

    for education, cost in EDUCATION_BASE_COSTS.items():
        if cost < 0:
            raise ValueError(f"Education cost for {education} cannot be negative")

    if DEFAULT_EDUCATION_TYPE not in EDUCATION_BASE_COSTS:
        raise ValueError("Default education type must have a base cost")
