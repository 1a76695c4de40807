"""
Unit Tests for CoverageEngine
"""

from dataclasses import replace

import pytest

from insurance_advisor.domain.models import CoverageType, HealthStatus, Priority
from insurance_advisor.domain.services.coverage_engine import CoverageEngine


@pytest.fixture
def engine(needs_engine):
    return CoverageEngine(needs_engine, currency_symbol="R$")


@pytest.fixture
def baseline_factors(risk_engine, baseline_profile):
    return risk_engine.resolve(baseline_profile)


@pytest.mark.unit
class TestCalculateAll:

    def test_display_order(self, engine, baseline_profile, baseline_factors):
        coverages = engine.calculate_all(baseline_profile, baseline_factors, HealthStatus.GOOD)
        assert [c.type for c in coverages] == [
            CoverageType.DEATH,
            CoverageType.DISABILITY,
            CoverageType.CRITICAL_ILLNESS,
            CoverageType.DAILY_INCAPACITY,
            CoverageType.FUNERAL,
        ]

    def test_amounts_are_whole_and_non_negative(self, engine, baseline_profile, baseline_factors):
        for coverage in engine.calculate_all(baseline_profile, baseline_factors, HealthStatus.GOOD):
            assert isinstance(coverage.amount, int)
            assert coverage.amount >= 0


@pytest.mark.unit
class TestDeath:

    def test_amount_and_metadata(self, engine, baseline_profile, baseline_factors):
        death = engine.death(baseline_profile, baseline_factors, HealthStatus.GOOD)

        assert death.amount == 5_366_592
        assert death.priority == Priority.HIGH
        assert death.risk_factors == ("Age 35", "Health good", "Low risk", "2 dependent(s)")
        assert death.calculation_basis == "Capital Retention x risk multiplier"
        assert "Capital Retention method" in death.justification
        assert "R$ 20,000.00" in death.justification
        assert "total risk multiplier of 2.13x." in death.justification

    def test_lifestyle_flags_listed(self, engine, risk_engine, baseline_profile):
        profile = replace(
            baseline_profile,
            smoker=True,
            practices_risk_sport=True,
            family_history_serious_illness=True,
        )
        death = engine.death(profile, risk_engine.resolve(profile), HealthStatus.GOOD)
        assert death.risk_factors[-3:] == ("Smoker", "Risk sports", "Family history")

    def test_no_dependents_text(self, engine, risk_engine, baseline_profile):
        profile = replace(baseline_profile, has_dependents=False, dependents_count=0, current_debts=0)
        death = engine.death(profile, risk_engine.resolve(profile), HealthStatus.GOOD)

        assert "No dependents" in death.risk_factors
        assert "a reserve for future expenses" in death.justification


@pytest.mark.unit
class TestDisability:

    def test_amount(self, engine, baseline_profile, baseline_factors):
        disability = engine.disability(baseline_profile, baseline_factors)

        # 0.75 x 1,200,000 x 2.1296 + 24 x 10,000
        assert disability.amount == 2_156_640
        assert disability.priority == Priority.HIGH
        assert disability.risk_factors[0] == "Profession: Low risk"
        assert "engenheiro" in disability.justification


@pytest.mark.unit
class TestCriticalIllness:

    def test_income_proxy_when_expenses_unknown(self, engine, baseline_profile):
        coverage = engine.critical_illness(baseline_profile, HealthStatus.GOOD)
        # 0.7 x 10,000 x 24 + max(80,000, 8 x 10,000)
        assert coverage.amount == 248_000
        assert coverage.priority == Priority.MEDIUM

    def test_known_expenses(self, engine, baseline_profile):
        profile = replace(baseline_profile, monthly_expenses=4000, monthly_income=20000)
        coverage = engine.critical_illness(profile, HealthStatus.GOOD)
        assert coverage.amount == 4000 * 24 + 160_000

    def test_known_zero_expenses(self, engine, baseline_profile):
        profile = replace(baseline_profile, monthly_expenses=0)
        assert engine.critical_illness(profile, HealthStatus.GOOD).amount == 80_000

    def test_medical_floor(self, engine, baseline_profile):
        profile = replace(baseline_profile, monthly_income=1000)
        assert engine.critical_illness(profile, HealthStatus.GOOD).amount == 16_800 + 80_000

    @pytest.mark.parametrize(
        "changes,health",
        [
            ({}, HealthStatus.REGULAR),
            ({}, HealthStatus.POOR),
            ({"family_history_serious_illness": True}, HealthStatus.EXCELLENT),
            ({"smoker": True}, HealthStatus.GOOD),
            ({"age": 46}, HealthStatus.GOOD),
        ],
    )
    def test_high_priority_triggers(self, engine, baseline_profile, changes, health):
        profile = replace(baseline_profile, **changes)
        assert engine.critical_illness_priority(profile, health) == Priority.HIGH

    def test_age_45_is_medium(self, engine, baseline_profile):
        profile = replace(baseline_profile, age=45)
        assert engine.critical_illness_priority(profile, HealthStatus.EXCELLENT) == Priority.MEDIUM

    def test_smoker_text(self, engine, baseline_profile):
        profile = replace(baseline_profile, smoker=True)
        coverage = engine.critical_illness(profile, HealthStatus.GOOD)
        assert "Smoker - high cardiovascular risk" in coverage.risk_factors
        assert "As a smoker" in coverage.justification


@pytest.mark.unit
class TestDailyIncapacityAndFuneral:

    def test_daily_incapacity(self, engine, baseline_profile):
        coverage = engine.daily_incapacity(baseline_profile)
        # 0.8 x 10,000 / 30 x 365
        assert coverage.amount == 97_333
        assert coverage.priority == Priority.MEDIUM
        assert coverage.risk_factors[0] == "Daily income: R$ 333.33"

    def test_funeral_adjustment(self, engine, baseline_profile):
        coverage = engine.funeral(baseline_profile)
        assert coverage.amount == 18_000
        assert coverage.priority == Priority.LOW

    def test_funeral_adjustment_capped(self, engine, baseline_profile):
        profile = replace(baseline_profile, monthly_income=100_000)
        assert engine.funeral(profile).amount == 30_000

    def test_zero_income(self, engine, baseline_profile):
        profile = replace(baseline_profile, monthly_income=0)
        assert engine.daily_incapacity(profile).amount == 0
        assert engine.funeral(profile).amount == 15_000
