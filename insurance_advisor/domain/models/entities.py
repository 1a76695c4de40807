"""
Domain Models - Entities
Pure domain objects with no infrastructure dependencies
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple


class HealthStatus(str, Enum):
    """Self-declared health status"""
    EXCELLENT = "excellent"
    GOOD = "good"
    REGULAR = "regular"
    POOR = "poor"

    @classmethod
    def resolve(cls, raw: Optional[str]) -> Optional["HealthStatus"]:
        """Map canonical or legacy intake-form values, None if unknown"""
        return _resolve(cls, raw, _HEALTH_ALIASES)


class EducationType(str, Enum):
    """Education level a dependent is expected to complete"""
    SECONDARY = "secondary"
    TECHNICAL = "technical"
    HIGHER = "higher"

    @classmethod
    def resolve(cls, raw: Optional[str]) -> Optional["EducationType"]:
        return _resolve(cls, raw, _EDUCATION_ALIASES)


class MaritalStatus(str, Enum):
    """Marital status"""
    SINGLE = "single"
    MARRIED = "married"
    CIVIL_UNION = "civil_union"
    DIVORCED = "divorced"
    WIDOWED = "widowed"

    @classmethod
    def resolve(cls, raw: Optional[str]) -> Optional["MaritalStatus"]:
        return _resolve(cls, raw, _MARITAL_ALIASES)

    @property
    def has_partner(self) -> bool:
        return self in (MaritalStatus.MARRIED, MaritalStatus.CIVIL_UNION)


class CoverageType(str, Enum):
    """Insurance product recommended by the engine"""
    DEATH = "Death"
    DISABILITY = "Disability"
    CRITICAL_ILLNESS = "CriticalIllness"
    DAILY_INCAPACITY = "DailyIncapacity"
    FUNERAL = "Funeral"

    @property
    def label(self) -> str:
        """Display name used in narrative text"""
        return _COVERAGE_LABELS[self]


class Priority(str, Enum):
    """Recommendation priority"""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RiskProfile(str, Enum):
    """Overall risk classification"""
    HIGH_RISK = "High Risk"
    ELEVATED_RISK = "Elevated Risk"
    MEDIUM_RISK = "Medium Risk"
    ADEQUATE = "Adequate Profile"


_HEALTH_ALIASES = {
    "excelente": HealthStatus.EXCELLENT,
    "bom": HealthStatus.GOOD,
    "precario": HealthStatus.POOR,
    "precário": HealthStatus.POOR,
}

_EDUCATION_ALIASES = {
    "medio": EducationType.SECONDARY,
    "médio": EducationType.SECONDARY,
    "tecnico": EducationType.TECHNICAL,
    "técnico": EducationType.TECHNICAL,
    "superior": EducationType.HIGHER,
}

_MARITAL_ALIASES = {
    "solteiro": MaritalStatus.SINGLE,
    "casado": MaritalStatus.MARRIED,
    "uniao_estavel": MaritalStatus.CIVIL_UNION,
    "divorciado": MaritalStatus.DIVORCED,
    "viuvo": MaritalStatus.WIDOWED,
}

_COVERAGE_LABELS = {
    CoverageType.DEATH: "Death",
    CoverageType.DISABILITY: "Permanent Total Disability (IPTA)",
    CoverageType.CRITICAL_ILLNESS: "Critical Illness",
    CoverageType.DAILY_INCAPACITY: "Daily Incapacity (DIT)",
    CoverageType.FUNERAL: "Funeral",
}


def _resolve(enum_cls, raw, aliases):
    if raw is None:
        return None
    if isinstance(raw, enum_cls):
        return raw
    key = str(raw).strip().lower()
    if not key:
        return None
    for member in enum_cls:
        if member.value == key:
            return member
    return aliases.get(key)


@dataclass(frozen=True)
class Dependent:
    """Detailed dependent record - Immutable"""
    age: int
    years_until_education_complete: int
    education_type: Optional[str] = None
    name: Optional[str] = None

    @property
    def education(self) -> Optional[EducationType]:
        return EducationType.resolve(self.education_type)

    @property
    def age_at_education_complete(self) -> int:
        return self.age + self.years_until_education_complete


_MONEY_FIELDS = (
    "monthly_income",
    "current_debts",
    "net_worth",
    "monthly_expenses",
    "emergency_reserves",
    "existing_premium",
    "existing_investments",
)


@dataclass(frozen=True)
class ClientProfile:
    """
    Client profile - Immutable input of one calculation

    Optional numeric fields are None when unknown; zero means a known zero.
    """
    name: str
    age: int
    gender: str
    profession: str
    monthly_income: Decimal
    has_dependents: bool
    dependents_count: int
    current_debts: Decimal
    health_status: Optional[str]
    existing_insurance: bool
    dependents_data: Tuple[Dependent, ...] = ()

    # Extended attributes
    net_worth: Optional[Decimal] = None
    monthly_expenses: Optional[Decimal] = None
    emergency_reserves: Optional[Decimal] = None
    marital_status: Optional[str] = None
    smoker: bool = False
    practices_risk_sport: bool = False
    preexisting_conditions: FrozenSet[str] = frozenset()
    family_history_serious_illness: bool = False
    existing_coverage_types: FrozenSet[str] = frozenset()
    existing_premium: Optional[Decimal] = None
    existing_investments: Optional[Decimal] = None
    partner_broker: Optional[str] = None

    def __post_init__(self):
        # Money is carried as Decimal; ints and floats from callers are converted
        for name in _MONEY_FIELDS:
            value = getattr(self, name)
            if value is not None and not isinstance(value, Decimal):
                object.__setattr__(self, name, Decimal(str(value)))

    @property
    def annual_income(self) -> Decimal:
        return self.monthly_income * 12

    @property
    def marital(self) -> Optional[MaritalStatus]:
        return MaritalStatus.resolve(self.marital_status)

    @property
    def has_dependents_data(self) -> bool:
        return len(self.dependents_data) > 0

    @property
    def effective_dependents_count(self) -> int:
        """Detailed records override the declared count"""
        if self.has_dependents_data:
            return len(self.dependents_data)
        return self.dependents_count


@dataclass(frozen=True)
class RiskFactors:
    """Derived risk multipliers - recomputed every calculation"""
    age_multiplier: float
    health_multiplier: float
    profession_multiplier: float
    profession_category: str
    dependents_multiplier: float
    lifestyle_multiplier: float

    @property
    def total_multiplier(self) -> float:
        return (
            self.age_multiplier
            * self.health_multiplier
            * self.profession_multiplier
            * self.dependents_multiplier
            * self.lifestyle_multiplier
        )


@dataclass(frozen=True)
class CoverageRecommendation:
    """Single coverage recommendation - Immutable"""
    type: CoverageType
    amount: int
    justification: str
    priority: Priority
    risk_factors: Tuple[str, ...]
    calculation_basis: str

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError("Coverage amount cannot be negative")


@dataclass(frozen=True)
class AnalysisDetails:
    """Component risk deltas (multiplier minus one)"""
    age_risk: float
    health_risk: float
    profession_risk: float
    dependents_impact: float

    @staticmethod
    def from_risk_factors(risk_factors: RiskFactors) -> "AnalysisDetails":
        return AnalysisDetails(
            age_risk=risk_factors.age_multiplier - 1,
            health_risk=risk_factors.health_multiplier - 1,
            profession_risk=risk_factors.profession_multiplier - 1,
            dependents_impact=risk_factors.dependents_multiplier - 1,
        )


@dataclass(frozen=True)
class ClientAnalysis:
    """Final engine output - built once per profile, never mutated"""
    client_name: str
    risk_profile: RiskProfile
    recommended_coverages: Tuple[CoverageRecommendation, ...]
    summary: str
    analysis_details: AnalysisDetails
    total_multiplier: float = 1.0

    @property
    def total_recommended_amount(self) -> int:
        return sum(c.amount for c in self.recommended_coverages)

    def coverage(self, coverage_type: CoverageType) -> Optional[CoverageRecommendation]:
        """Find a coverage by type, None if filtered out"""
        for item in self.recommended_coverages:
            if item.type == coverage_type:
                return item
        return None

    def to_record(self) -> Dict:
        """Storage record consumed by the persistence layer"""
        return {
            "client_name": self.client_name,
            "risk_profile": self.risk_profile.value,
            "recommended_coverage": [
                {
                    "type": c.type.value,
                    "amount": c.amount,
                    "justification": c.justification,
                    "priority": c.priority.value,
                    "risk_factors": list(c.risk_factors),
                    "calculation_basis": c.calculation_basis,
                }
                for c in self.recommended_coverages
            ],
            "justifications": {"summary": self.summary},
        }
