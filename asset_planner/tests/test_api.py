from __future__ import annotations

from flask.testing import FlaskClient


def plan_payload() -> dict:
    return {
        "holdings": [
            {"ticker": "0050", "name": "Taiwan 50", "quantity": 1000, "price": 200},
            {"ticker": "00878", "quantity": 5000, "price": 20, "is_estimate": True},
        ],
        "projection": {
            "initial_return_rate": 6,
            "years": 5,
            "strategies": [
                {"name": "leveraged", "monthly_amount": 3000, "return_rate": 20},
                {"name": "bonds", "monthly_amount": 1000, "return_rate": 4},
            ],
        },
        "withdrawal": {
            "initial_rate": 4,
            "upper_guardrail": 20,
            "lower_guardrail": 20,
            "expected_return": 7,
            "volatility": 15,
            "simulations": 10,
            "years": 30,
        },
        "seed": 7,
    }


def test_portfolio_value_endpoint(client: FlaskClient):
    resp = client.post("/api/portfolio/value", json={"holdings": plan_payload()["holdings"]})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["total_value"] == 300000
    assert [line["value"] for line in body["holdings"]] == [200000, 100000]


def test_negative_quantity_is_rejected(client: FlaskClient):
    resp = client.post(
        "/api/portfolio/value",
        json={"holdings": [{"ticker": "0050", "quantity": -1, "price": 200}]},
    )

    assert resp.status_code == 422
    assert "detail" in resp.get_json()


def test_projection_endpoint_returns_every_year(client: FlaskClient):
    payload = {"starting_value": 300000, "params": plan_payload()["projection"]}
    resp = client.post("/api/projection", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert [row["year"] for row in body["snapshots"]] == [0, 1, 2, 3, 4, 5]
    assert body["final"] == body["snapshots"][-1]
    assert body["total_monthly_contribution"] == 4000
    for row in body["snapshots"]:
        assert row["growth"] == row["total"] - row["principal"]


def test_projection_defaults_when_params_are_omitted(client: FlaskClient):
    resp = client.post("/api/projection", json={"starting_value": 1000})

    assert resp.status_code == 200
    body = resp.get_json()
    assert len(body["snapshots"]) == 11
    assert body["total_monthly_contribution"] == 3000


def test_withdrawal_endpoint_is_reproducible_with_a_seed(client: FlaskClient):
    payload = {"starting_value": 2_000_000, "params": plan_payload()["withdrawal"], "seed": 11}

    first = client.post("/api/withdrawal/simulate", json=payload)
    second = client.post("/api/withdrawal/simulate", json=payload)

    assert first.status_code == 200
    assert first.get_json() == second.get_json()
    body = first.get_json()
    assert len(body["runs"]) == 10
    assert set(body["summary"]) == {"success_rate", "median_final_value", "best_case", "worst_case"}


def test_withdrawal_rate_on_an_emptied_portfolio_serializes_as_null(client: FlaskClient):
    params = {
        "initial_rate": 50,
        "upper_guardrail": 1e9,
        "expected_return": 0,
        "volatility": 0,
        "simulations": 1,
        "years": 10,
    }
    resp = client.post("/api/withdrawal/simulate", json={"starting_value": 1000, "params": params})

    assert resp.status_code == 200
    run = resp.get_json()["runs"][0]
    assert len(run) == 2
    assert run[-1]["withdrawal_rate"] is None
    assert run[-1]["portfolio_value"] == 0


def test_too_many_simulations_are_rejected(client: FlaskClient):
    params = dict(plan_payload()["withdrawal"], simulations=51)
    resp = client.post("/api/withdrawal/simulate", json={"starting_value": 1000, "params": params})

    assert resp.status_code == 422


def test_withdrawal_horizon_beyond_the_limit_is_rejected(client: FlaskClient):
    params = dict(plan_payload()["withdrawal"], years=61)
    resp = client.post("/api/withdrawal/simulate", json={"starting_value": 1000, "params": params})

    assert resp.status_code == 422
    assert resp.get_json()["detail"][0]["loc"] == ["withdrawal", "years"]


def test_projection_horizon_beyond_the_limit_is_rejected(client: FlaskClient):
    params = dict(plan_payload()["projection"], years=100_000_000)
    resp = client.post("/api/projection", json={"starting_value": 1000, "params": params})

    assert resp.status_code == 422
    assert resp.get_json()["detail"][0]["loc"] == ["projection", "years"]


def test_plan_reports_every_oversized_field(client: FlaskClient):
    payload = plan_payload()
    payload["projection"]["years"] = 61
    payload["withdrawal"]["years"] = 61
    payload["withdrawal"]["simulations"] = 51
    resp = client.post("/api/plan", json=payload)

    assert resp.status_code == 422
    locs = [error["loc"] for error in resp.get_json()["detail"]]
    assert locs == [["projection", "years"], ["withdrawal", "years"], ["withdrawal", "simulations"]]


def test_overflowing_projection_serializes_as_null(client: FlaskClient):
    params = {"initial_return_rate": 1e6, "years": 40, "strategies": []}
    resp = client.post("/api/projection", json={"starting_value": 1000, "params": params})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["snapshots"][0]["total"] == 1000
    assert body["final"]["total"] is None
    assert body["final"]["principal"] == 1000


def test_zero_simulations_fail_validation(client: FlaskClient):
    params = dict(plan_payload()["withdrawal"], simulations=0)
    resp = client.post("/api/withdrawal/simulate", json={"starting_value": 1000, "params": params})

    assert resp.status_code == 422
    assert any(error["loc"][-1] == "simulations" for error in resp.get_json()["detail"])


def test_plan_endpoint_runs_the_whole_pipeline(client: FlaskClient):
    resp = client.post("/api/plan", json=plan_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["current_value"] == 300000
    assert body["total_monthly_contribution"] == 4000
    assert len(body["snapshots"]) == 6
    assert body["starting_value"] == body["snapshots"][-1]["total"]
    assert len(body["runs"]) == 10
    assert 0 <= body["summary"]["success_rate"] <= 100
    assert body["runs"][0][0]["withdrawal_amount"] == body["starting_value"] * 0.04


def test_non_object_body_returns_400(client: FlaskClient):
    resp = client.post("/api/plan", data="[1, 2, 3]", content_type="application/json")

    assert resp.status_code == 400
    assert "detail" in resp.get_json()


def test_malformed_json_returns_400(client: FlaskClient):
    resp = client.post("/api/projection", data="{not json", content_type="application/json")

    assert resp.status_code == 400
