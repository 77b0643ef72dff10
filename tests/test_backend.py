import pytest

from sipcalc import backend
from sipcalc.config import Settings
from sipcalc.engine.projector import DegenerateRateError


@pytest.fixture
def client():
    app = backend.create_app(Settings())
    app.config["TESTING"] = True
    return app.test_client()


def test_healthcheck(client):
    resp = client.get("/api/health")

    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


def test_schema_lists_form_bounds(client):
    data = client.get("/api/schema").get_json()

    sip_fields = {field["field"]: field for field in data["sip"]["fields"]}
    plan_fields = {field["field"]: field for field in data["plan"]["fields"]}

    assert sip_fields["monthlyAmount"]["min"] == 500
    assert sip_fields["years"]["max"] == 40
    assert plan_fields["riskProfile"]["options"] == ["conservative", "moderate", "aggressive"]
    assert "short-term" in plan_fields["investmentGoal"]["options"]


def test_sip_projection(client):
    resp = client.post("/api/sip", json={"monthlyAmount": 5000, "annualReturn": 12, "years": 10})

    assert resp.status_code == 200
    data = resp.get_json()
    assert data["result"]["totalInvestment"] == 600000
    assert data["formatted"]["totalInvestment"] == "₹6,00,000"
    assert "schedule" not in data


def test_sip_projection_with_schedule(client):
    resp = client.post(
        "/api/sip",
        json={"monthlyAmount": "5000", "annualReturn": "12", "years": "10", "schedule": True, "freq": "5Y"},
    )

    data = resp.get_json()
    assert data["freq"] == "5Y"
    assert [row["Year"] for row in data["schedule"]] == [5.0, 10.0]
    assert data["schedule"][-1]["Value"] == data["result"]["totalValue"]


def test_sip_validation_errors(client):
    resp = client.post("/api/sip", json={"monthlyAmount": 100, "annualReturn": 12})

    assert resp.status_code == 400
    errors = resp.get_json()["errors"]
    assert errors["monthlyAmount"] == "Monthly amount must be at least 500"
    assert errors["years"] == "Investment period is required"


def test_sip_degenerate_rate_is_unprocessable(client, monkeypatch):
    def _raise(sip):
        raise DegenerateRateError("rate cannot compound")

    monkeypatch.setattr(backend, "project_input", _raise)

    resp = client.post("/api/sip", json={"monthlyAmount": 5000, "annualReturn": 12, "years": 10})

    assert resp.status_code == 422
    assert resp.get_json() == {"error": "rate cannot compound"}


def test_plan_recommendations(client):
    resp = client.post(
        "/api/plan",
        json={"age": 32, "monthlyIncome": 90000, "riskProfile": "moderate", "investmentGoal": "short-term"},
    )

    assert resp.status_code == 200
    recs = resp.get_json()["recommendations"]
    assert len(recs) == 5
    assert recs[1]["list"][0] == "Equity-oriented investments: 68% (for growth potential)"
    assert all(rec["title"] != "Tax Planning" for rec in recs)


def test_plan_requires_selections(client):
    resp = client.post("/api/plan", json={"age": 32, "monthlyIncome": 90000})

    assert resp.status_code == 400
    assert resp.get_json()["errors"] == {
        "riskProfile": "Please select a risk profile",
        "investmentGoal": "Please select an investment goal",
    }


def test_cors_origin_from_settings():
    app = backend.create_app(Settings(cors_origin="http://localhost:3000"))

    resp = app.test_client().get("/api/health")

    assert resp.headers["Access-Control-Allow-Origin"] == "http://localhost:3000"


def test_plan_rejects_non_object_body(client):
    resp = client.post("/api/plan", json=[1, 2])

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Invalid input.", "errors": {"payload": "Expected a JSON object"}}


def test_sip_rejects_non_object_body(client):
    resp = client.post("/api/sip", json=5)

    assert resp.status_code == 400
    assert resp.get_json()["errors"] == {"payload": "Expected a JSON object"}
