"""
CONFIG ENGINE (ENGINE-0)
Load, validate, and expose risk table configuration

RESPONSIBILITIES:
- Load YAML risk tables
- Validate configuration integrity
- Expose read-only typed objects

RULES:
❌ No defaults if config missing
❌ No hardcoded tables
✅ Fail fast on invalid config
✅ Profession table order preserved (first match wins)
✅ Deterministic output
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from insurance_advisor.domain.models import HealthStatus, RiskProfile
from insurance_advisor.utils.text import normalize_keyword

logger = logging.getLogger(__name__)

RISK_TABLES_FILE = "risk_tables.yml"


@dataclass(frozen=True)
class AgeBand:
    """Age band - upper bound inclusive, None for the open last band"""
    label: str
    max_age: Optional[int]
    multiplier: float


@dataclass(frozen=True)
class ProfessionRisk:
    """Profession keyword mapped to a multiplier and category"""
    keyword: str
    multiplier: float
    category: str


@dataclass(frozen=True)
class RiskProfileThreshold:
    """Minimum total multiplier for a risk profile"""
    min_multiplier: float
    profile: RiskProfile


@dataclass(frozen=True)
class RiskTables:
    """All lookup data needed to resolve risk factors"""
    version: str
    age_bands: Tuple[AgeBand, ...]
    health_multipliers: Dict[HealthStatus, float]
    default_health_status: HealthStatus
    family_history_factor: float
    professions: Tuple[ProfessionRisk, ...]
    default_profession: ProfessionRisk
    smoker_factor: float
    risk_sport_factor: float
    per_dependent_factor: float
    risk_profiles: Tuple[RiskProfileThreshold, ...]
    fallback_risk_profile: RiskProfile

    @property
    def keywords(self) -> List[str]:
        return [p.keyword for p in self.professions]


class ConfigEngine:
    """
    Configuration Engine
    Single source of truth for risk table configuration
    """

    def __init__(self, config_dir: Path):
        """Initialize with config directory"""
        self.config_dir = Path(config_dir)
        self._risk_tables: Optional[RiskTables] = None

    def load_all(self) -> None:
        """Load all configuration files"""
        self._load_risk_tables()
        self._validate_all()
        logger.info(
            "Risk tables %s loaded: %d professions, %d age bands",
            self._risk_tables.version,
            len(self._risk_tables.professions),
            len(self._risk_tables.age_bands),
        )

    def _load_risk_tables(self) -> None:
        """Load risk tables from risk_tables.yml"""
        tables_file = self.config_dir / RISK_TABLES_FILE
        if not tables_file.exists():
            raise FileNotFoundError(f"Risk tables config not found: {tables_file}")

        with open(tables_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        try:
            age_bands = tuple(
                AgeBand(
                    label=str(band['label']),
                    max_age=band.get('max_age'),
                    multiplier=float(band['multiplier']),
                )
                for band in data['age_bands']
            )

            health = data['health']
            health_multipliers = {}
            for status, value in health['multipliers'].items():
                resolved = HealthStatus.resolve(status)
                if resolved is None:
                    raise ValueError(f"Unknown health status in config: {status}")
                health_multipliers[resolved] = float(value)

            default_health = HealthStatus.resolve(health['default_status'])
            if default_health is None:
                raise ValueError(f"Unknown default health status: {health['default_status']}")

            professions = tuple(
                ProfessionRisk(
                    keyword=normalize_keyword(str(item['keyword'])),
                    multiplier=float(item['multiplier']),
                    category=str(item['category']),
                )
                for item in data['professions']
            )

            default_profession = ProfessionRisk(
                keyword="",
                multiplier=float(data['default_profession']['multiplier']),
                category=str(data['default_profession']['category']),
            )

            risk_profiles = tuple(
                RiskProfileThreshold(
                    min_multiplier=float(item['min_multiplier']),
                    profile=RiskProfile(item['label']),
                )
                for item in data['risk_profiles']
            )

            self._risk_tables = RiskTables(
                version=str(data.get('version', 'unversioned')),
                age_bands=age_bands,
                health_multipliers=health_multipliers,
                default_health_status=default_health,
                family_history_factor=float(health['family_history_factor']),
                professions=professions,
                default_profession=default_profession,
                smoker_factor=float(data['lifestyle']['smoker']),
                risk_sport_factor=float(data['lifestyle']['risk_sport']),
                per_dependent_factor=float(data['dependents']['per_dependent']),
                risk_profiles=risk_profiles,
                fallback_risk_profile=RiskProfile(data['fallback_risk_profile']),
            )
        except KeyError as exc:
            raise ValueError(f"Missing key in {tables_file}: {exc}") from exc

    def _validate_all(self) -> None:
        """Validate loaded tables"""
        tables = self._risk_tables

        if not tables.age_bands:
            raise ValueError("Age bands cannot be empty")
        bounded = [band.max_age for band in tables.age_bands[:-1]]
        if any(bound is None for bound in bounded):
            raise ValueError("Only the last age band may be open-ended")
        if bounded != sorted(bounded) or len(set(bounded)) != len(bounded):
            raise ValueError("Age bands must be sorted by ascending upper bound")
        if tables.age_bands[-1].max_age is not None:
            raise ValueError("The last age band must be open-ended")

        missing = set(HealthStatus) - set(tables.health_multipliers)
        if missing:
            raise ValueError(f"Missing health multipliers: {sorted(m.value for m in missing)}")

        if not tables.professions:
            raise ValueError("Profession table cannot be empty")
        keywords = tables.keywords
        if any(not keyword for keyword in keywords):
            raise ValueError("Profession keywords must contain letters")
        if len(keywords) != len(set(keywords)):
            raise ValueError("Duplicate profession keywords found in configuration")

        multipliers = (
            [band.multiplier for band in tables.age_bands]
            + list(tables.health_multipliers.values())
            + [p.multiplier for p in tables.professions]
            + [
                tables.default_profession.multiplier,
                tables.family_history_factor,
                tables.smoker_factor,
                tables.risk_sport_factor,
            ]
        )
        if any(m <= 0 for m in multipliers):
            raise ValueError("All multipliers must be positive")
        if tables.per_dependent_factor < 0:
            raise ValueError("Per-dependent factor cannot be negative")

        thresholds = [t.min_multiplier for t in tables.risk_profiles]
        if any(a <= b for a, b in zip(thresholds, thresholds[1:])):
            raise ValueError("Risk profile thresholds must be strictly descending")

    # Public getters

    @property
    def risk_tables(self) -> RiskTables:
        """Get risk tables"""
        if self._risk_tables is None:
            raise RuntimeError("Config not loaded. Call load_all() first")
        return self._risk_tables

    @property
    def version(self) -> str:
        """Get risk tables version"""
        return self.risk_tables.version
