"""
Unit Tests for RiskFactorEngine
"""

from dataclasses import replace

import pytest

from insurance_advisor.domain.models import Dependent, HealthStatus


@pytest.mark.unit
class TestAgeMultiplier:
    """Banded age lookup, upper bound inclusive"""

    @pytest.mark.parametrize(
        "age,expected",
        [
            (18, 1.0),
            (25, 1.0),
            (26, 1.1),
            (35, 1.1),
            (45, 1.3),
            (46, 1.6),
            (55, 1.6),
            (65, 2.2),
            (66, 3.0),
            (99, 3.0),
        ],
    )
    def test_band_boundaries(self, risk_engine, age, expected):
        assert risk_engine.age_multiplier(age) == pytest.approx(expected)

    def test_below_first_band_uses_first_band(self, risk_engine):
        assert risk_engine.age_multiplier(10) == pytest.approx(1.0)
        assert risk_engine.age_multiplier(-5) == pytest.approx(1.0)

    def test_monotonic_non_decreasing(self, risk_engine):
        values = [risk_engine.age_multiplier(age) for age in range(0, 121)]
        assert values == sorted(values)


@pytest.mark.unit
class TestHealthMultiplier:

    @pytest.mark.parametrize(
        "status,expected",
        [
            ("excellent", 1.0),
            ("good", 1.1),
            ("regular", 1.3),
            ("poor", 1.8),
            ("Excelente", 1.0),
            ("bom", 1.1),
            ("precário", 1.8),
        ],
    )
    def test_known_statuses(self, risk_engine, status, expected):
        assert risk_engine.health_multiplier(status) == pytest.approx(expected)

    @pytest.mark.parametrize("status", [None, "", "unknown", "great"])
    def test_unknown_status_behaves_as_regular(self, risk_engine, status):
        assert risk_engine.health_multiplier(status) == pytest.approx(1.3)
        assert risk_engine.resolve_health(status) == HealthStatus.REGULAR

    def test_family_history_scales_multiplier(self, risk_engine):
        assert risk_engine.health_multiplier("poor", family_history=True) == pytest.approx(2.16)


@pytest.mark.unit
class TestProfessionRisk:

    @pytest.mark.parametrize(
        "profession,multiplier,category",
        [
            ("Engenheiro Civil", 1.1, "Low risk"),
            ("Médico", 1.1, "Low risk"),
            ("Software Engineer", 1.1, "Low risk"),
            ("Vendedor", 1.2, "Medium risk"),
            ("Motorista de ônibus", 1.4, "Medium risk"),
            ("Policial Militar", 2.0, "High risk"),
            ("Bombeiro", 2.2, "High risk"),
            ("Construção Civil", 1.9, "High risk"),
        ],
    )
    def test_keyword_match(self, risk_engine, profession, multiplier, category):
        entry = risk_engine.profession_risk(profession)
        assert entry.multiplier == pytest.approx(multiplier)
        assert entry.category == category

    @pytest.mark.parametrize("profession", ["Astronaut", "", None, "123 !!"])
    def test_unmatched_uses_default(self, risk_engine, profession):
        entry = risk_engine.profession_risk(profession)
        assert entry.multiplier == pytest.approx(1.2)
        assert entry.category == "Medium risk"

    def test_first_match_in_table_order_wins(self, risk_engine):
        # Both "professor" (1.0) and "motorista" (1.4) are contained
        entry = risk_engine.profession_risk("Professor e Motorista")
        assert entry.keyword == "professor"
        assert entry.multiplier == pytest.approx(1.0)


@pytest.mark.unit
class TestDependentsAndLifestyle:

    def test_no_dependents_is_neutral(self, risk_engine):
        assert risk_engine.dependents_multiplier(False, 3) == pytest.approx(1.0)

    def test_per_dependent_increment(self, risk_engine):
        assert risk_engine.dependents_multiplier(True, 2) == pytest.approx(1.6)

    def test_lifestyle_factors_compound(self, risk_engine):
        assert risk_engine.lifestyle_multiplier(False, False) == pytest.approx(1.0)
        assert risk_engine.lifestyle_multiplier(True, False) == pytest.approx(1.8)
        assert risk_engine.lifestyle_multiplier(True, True) == pytest.approx(2.34)


@pytest.mark.unit
class TestResolve:

    def test_baseline_profile(self, risk_engine, baseline_profile):
        factors = risk_engine.resolve(baseline_profile)

        assert factors.age_multiplier == pytest.approx(1.1)
        assert factors.health_multiplier == pytest.approx(1.1)
        assert factors.profession_multiplier == pytest.approx(1.1)
        assert factors.profession_category == "Low risk"
        assert factors.dependents_multiplier == pytest.approx(1.6)
        assert factors.lifestyle_multiplier == pytest.approx(1.0)
        assert factors.total_multiplier == pytest.approx(2.1296)

    def test_dependent_records_override_count(self, risk_engine, baseline_profile):
        profile = replace(
            baseline_profile,
            dependents_count=0,
            dependents_data=(Dependent(4, 14), Dependent(8, 10), Dependent(12, 6)),
        )
        factors = risk_engine.resolve(profile)
        assert factors.dependents_multiplier == pytest.approx(1.9)
