import pytest

import insurance_advisor.main as app_main


@pytest.mark.asyncio
@pytest.mark.integration
async def test_create_analysis(client, baseline_payload):
    resp = await client.post("/api/v1/analysis", json=baseline_payload)
    assert resp.status_code == 200

    data = resp.json()
    assert data["clientName"] == "João Silva"
    assert data["riskProfile"] == "Elevated Risk"
    assert data["totalMultiplier"] == pytest.approx(2.1296)
    assert data["totalRecommendedAmount"] == 7_886_565
    assert [c["type"] for c in data["recommendedCoverages"]] == [
        "Death",
        "Disability",
        "CriticalIllness",
        "DailyIncapacity",
        "Funeral",
    ]

    death = data["recommendedCoverages"][0]
    assert death["amount"] == 5_366_592
    assert death["priority"] == "high"
    assert death["calculationBasis"] == "Capital Retention x risk multiplier"
    assert data["analysisDetails"]["dependentsImpact"] == pytest.approx(0.6)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_create_analysis_accepts_snake_case_and_dependents(client, baseline_payload):
    payload = {
        "name": "Ana",
        "age": 40,
        "profession": "Professora",
        "monthly_income": 8000,
        "has_dependents": True,
        "dependents_data": [
            {"age": 6, "years_until_education_complete": 16, "education_type": "superior"},
        ],
        "health_status": "excelente",
        "marital_status": "casado",
        "partner_broker": "Corretora Exemplo",
    }
    resp = await client.post("/api/v1/analysis", json=payload)
    assert resp.status_code == 200

    data = resp.json()
    assert data["analysisDetails"]["dependentsImpact"] == pytest.approx(0.3)
    assert "🤝 **Partner Broker:** Corretora Exemplo" in data["summary"]


@pytest.mark.asyncio
@pytest.mark.integration
@pytest.mark.parametrize(
    "field,value",
    [("age", -1), ("monthlyIncome", -100), ("name", "")],
)
async def test_create_analysis_rejects_invalid_profile(client, baseline_payload, field, value):
    payload = dict(baseline_payload, **{field: value})
    resp = await client.post("/api/v1/analysis", json=payload)
    assert resp.status_code == 422


@pytest.mark.asyncio
@pytest.mark.integration
async def test_create_analysis_without_engine(client, baseline_payload, monkeypatch):
    monkeypatch.setattr(app_main, "analysis_engine", None)
    resp = await client.post("/api/v1/analysis", json=baseline_payload)
    assert resp.status_code == 503


@pytest.mark.asyncio
@pytest.mark.integration
async def test_create_analysis_record(client, baseline_payload):
    resp = await client.post("/api/v1/analysis/record", json=baseline_payload)
    assert resp.status_code == 200

    data = resp.json()
    assert data["client_name"] == "João Silva"
    assert data["risk_profile"] == "Elevated Risk"
    assert len(data["recommended_coverage"]) == 5
    assert data["recommended_coverage"][4]["type"] == "Funeral"
    assert data["justifications"]["summary"].startswith("**COMPLETE LIFE INSURANCE ANALYSIS**")


@pytest.mark.asyncio
@pytest.mark.integration
async def test_young_client_record_has_no_death_coverage(client, baseline_payload):
    payload = dict(baseline_payload, age=23, hasDependents=False, dependentsCount=0)
    resp = await client.post("/api/v1/analysis/record", json=payload)
    assert resp.status_code == 200

    types = [c["type"] for c in resp.json()["recommended_coverage"]]
    assert "Death" not in types
