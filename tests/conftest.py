from pathlib import Path
from typing import AsyncGenerator

import pytest
from httpx import AsyncClient, ASGITransport

from insurance_advisor.domain.models import ClientProfile
from insurance_advisor.domain.services.analysis_engine import AnalysisEngine
from insurance_advisor.domain.services.config_engine import ConfigEngine
from insurance_advisor.domain.services.financial_needs_engine import FinancialNeedsEngine
from insurance_advisor.domain.services.risk_factor_engine import RiskFactorEngine
import insurance_advisor.main as app_main


@pytest.fixture(scope="session")
def config_dir() -> Path:
    return Path(__file__).resolve().parents[1] / "config"


@pytest.fixture(scope="session")
def config_engine(config_dir) -> ConfigEngine:
    engine = ConfigEngine(config_dir)
    engine.load_all()
    return engine


@pytest.fixture(scope="session")
def risk_tables(config_engine):
    return config_engine.risk_tables


@pytest.fixture
def risk_engine(risk_tables) -> RiskFactorEngine:
    return RiskFactorEngine(risk_tables)


@pytest.fixture
def needs_engine() -> FinancialNeedsEngine:
    return FinancialNeedsEngine()


@pytest.fixture
def analysis_engine(risk_tables) -> AnalysisEngine:
    return AnalysisEngine(risk_tables=risk_tables, currency_symbol="R$")


@pytest.fixture
def baseline_profile() -> ClientProfile:
    """35-year-old engineer, two dependents, good health"""
    return ClientProfile(
        name="João Silva",
        age=35,
        gender="male",
        profession="Engenheiro",
        monthly_income=10000,
        has_dependents=True,
        dependents_count=2,
        current_debts=20000,
        health_status="good",
        existing_insurance=False,
    )


@pytest.fixture
def baseline_payload() -> dict:
    return {
        "name": "João Silva",
        "age": 35,
        "gender": "male",
        "profession": "Engenheiro",
        "monthlyIncome": 10000,
        "hasDependents": True,
        "dependentsCount": 2,
        "currentDebts": 20000,
        "healthStatus": "good",
        "existingInsurance": False,
    }


@pytest.fixture()
async def client(monkeypatch, config_engine, analysis_engine) -> AsyncGenerator[AsyncClient, None]:
    # Lifespan is not run by ASGITransport; wire the globals directly
    monkeypatch.setattr(app_main, "config_engine", config_engine)
    monkeypatch.setattr(app_main, "analysis_engine", analysis_engine)

    transport = ASGITransport(app=app_main.app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
