from __future__ import annotations

from math import isclose, isfinite

from flask.testing import FlaskClient


def investment_payload(**overrides) -> dict:
    payload = {
        "name": "Bank FD 2024",
        "type": "FD",
        "principal": 100000,
        "rate": 6.5,
        "time": 5,
        "frequency": 12,
    }
    payload.update(overrides)
    return payload


def test_ping_returns_pong(client: FlaskClient):
    response = client.get("/api/ping")

    assert response.status_code == 200
    assert response.json["message"] == "pong"
    assert response.json["instruments"] == ["FD", "SIP", "PPF", "RD", "NSC", "ELSS"]


def test_instruments_lists_default_rates(client: FlaskClient):
    response = client.get("/api/instruments")

    assert response.status_code == 200
    rates = {item["type"]: item["defaultRate"] for item in response.json}
    assert rates == {"FD": 6.5, "SIP": 12.0, "PPF": 7.1, "RD": 6.0, "NSC": 6.8, "ELSS": 15.0}
    recurring = {item["type"] for item in response.json if item["recurring"]}
    assert recurring == {"SIP", "RD", "ELSS"}


def test_calculate_single_investment(client: FlaskClient):
    response = client.post("/api/investments/calculate", json=investment_payload(id="abc"))

    assert response.status_code == 200
    body = response.get_json()
    assert body["investment"]["id"] == "abc"
    assert isclose(body["maturityAmount"], 137008.67, abs_tol=0.01)
    assert len(body["yearlyBreakdown"]) == 5
    assert body["yearlyBreakdown"][0] == {
        "year": 1,
        "amount": body["yearlyBreakdown"][0]["amount"],
        "interest": body["yearlyBreakdown"][0]["interest"],
        "totalInvested": 100000.0,
    }
    assert body["warnings"] == []


def test_calculate_fills_missing_rate_from_catalogue(client: FlaskClient):
    payload = investment_payload(type="PPF", principal=150000, time=15)
    del payload["rate"]

    response = client.post("/api/investments/calculate", json=payload)

    assert response.status_code == 200
    assert response.get_json()["investment"]["rate"] == 7.1


def test_calculate_generates_id_when_missing(client: FlaskClient):
    first = client.post("/api/investments/calculate", json=investment_payload()).get_json()
    second = client.post("/api/investments/calculate", json=investment_payload()).get_json()

    assert first["investment"]["id"]
    assert first["investment"]["id"] != second["investment"]["id"]
    assert first["maturityAmount"] == second["maturityAmount"]


def test_calculate_rejects_invalid_form_input(client: FlaskClient):
    response = client.post(
        "/api/investments/calculate",
        json=investment_payload(principal=0, time=0, type="GOLD"),
    )

    assert response.status_code == 422
    fields = {error["loc"][0] for error in response.get_json()["detail"]}
    assert fields == {"principal", "time", "type"}


def test_calculate_rejects_blank_name(client: FlaskClient):
    response = client.post("/api/investments/calculate", json=investment_payload(name="   "))

    assert response.status_code == 422
    assert "detail" in response.get_json()


def test_compare_returns_chart_and_summary_data(client: FlaskClient):
    payload = {
        "investments": [
            investment_payload(name="Bank FD", time=2),
            investment_payload(name="Index SIP", type="SIP", principal=5000, rate=12, time=4),
        ]
    }

    response = client.post("/api/investments/compare", json=payload)

    assert response.status_code == 200
    body = response.get_json()
    assert [result["investment"]["name"] for result in body["results"]] == ["Bank FD", "Index SIP"]
    assert [row["year"] for row in body["growth"]] == [1, 2, 3, 4]
    assert body["growth"][3]["Bank FD"] == 0
    assert body["comparison"][1]["invested"] == 5000 * 4 * 12
    assert body["summary"]["bestMaturity"]["name"] == "Index SIP"
    assert body["warnings"] == []


def test_compare_empty_list(client: FlaskClient):
    response = client.post("/api/investments/compare", json={"investments": []})

    assert response.status_code == 200
    body = response.get_json()
    assert body["results"] == []
    assert body["growth"] == []
    assert body["summary"]["bestMaturity"] is None


def test_compare_reports_warnings(client: FlaskClient):
    payload = {"investments": [investment_payload(frequency=4)]}

    response = client.post("/api/investments/compare", json=payload)

    assert response.status_code == 200
    assert any("frequency ignored" in message for message in response.get_json()["warnings"])


def test_compare_duplicate_ids_returns_400(client: FlaskClient):
    payload = {"investments": [investment_payload(id="x"), investment_payload(id="x", name="Again")]}

    response = client.post("/api/investments/compare", json=payload)

    assert response.status_code == 400
    assert any("duplicate" in message for message in response.get_json()["error"])


def test_compare_limit_returns_400(client: FlaskClient):
    payload = {"investments": [investment_payload(name=f"FD {i}") for i in range(4)]}

    response = client.post("/api/investments/compare", json=payload)

    assert response.status_code == 400
    assert response.get_json()["error"] == ["at most 3 investments can be compared"]


def test_export_returns_csv_attachment(client: FlaskClient):
    payload = {"investments": [investment_payload(name="Bank FD", rate=10, time=1)]}

    response = client.post("/api/investments/export", json=payload)

    assert response.status_code == 200
    assert response.mimetype == "text/csv"
    assert "investment_summary.csv" in response.headers["Content-Disposition"]
    lines = response.get_data(as_text=True).splitlines()
    assert lines == ["Name,Type,Invested,Returns,Maturity", "Bank FD,FD,100000.00,10000.00,110000.00"]


def test_principal_above_limit_returns_422(client: FlaskClient):
    payload = {"investments": [investment_payload(principal=1e308, rate=50, time=50)]}

    response = client.post("/api/investments/compare", json=payload)

    assert response.status_code == 422
    assert [error["loc"] for error in response.get_json()["detail"]] == [
        ["investments", 0, "principal"]
    ]


def test_largest_allowed_inputs_stay_finite(client: FlaskClient):
    payload = {
        "investments": [
            investment_payload(name="Max FD", principal=1_000_000_000, rate=50, time=50),
            investment_payload(
                name="Max SIP", type="SIP", principal=1_000_000_000, rate=50, time=50, frequency=365
            ),
        ]
    }

    response = client.post("/api/investments/compare", json=payload)

    assert response.status_code == 200
    maturities = [result["maturityAmount"] for result in response.get_json()["results"]]
    assert all(isfinite(value) for value in maturities)


def test_compare_duplicate_names_returns_400(client: FlaskClient):
    payload = {"investments": [investment_payload(name="Same"), investment_payload(name="Same", type="RD")]}

    response = client.post("/api/investments/compare", json=payload)

    assert response.status_code == 400
    assert response.get_json()["error"] == ["duplicate investment name Same"]
