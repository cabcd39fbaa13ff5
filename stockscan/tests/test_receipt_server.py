from pathlib import Path

from fastapi.testclient import TestClient
from stockscan.receipt import NO_ITEMS_HINT
from stockscan.runtime.receipt_server import app

client = TestClient(app)


def test_parse_returns_items_with_string_prices() -> None:
    response = client.post("/parse", json={"text": "Milk 2L      1.99\n2 x Bread Rolls    3.50"})

    assert response.status_code == 200
    assert response.json() == {
        "status": "success",
        "items": [
            {"name": "Milk 2l", "quantity": 1, "price": "1.99"},
            {"name": "Bread Rolls", "quantity": 2, "price": "3.50"},
        ],
        "count": 2,
        "message": None,
    }


def test_parse_with_no_items_returns_crop_hint() -> None:
    response = client.post("/parse", json={"text": "TOTAL 12.45\n-----"})

    assert response.status_code == 200
    body = response.json()
    assert body["items"] == []
    assert body["count"] == 0
    assert body["message"] == NO_ITEMS_HINT


def test_parse_accepts_plain_text_body() -> None:
    response = client.post(
        "/parse",
        content="Apple Juice £2,50".encode("utf-8"),
        headers={"content-type": "text/plain; charset=utf-8"},
    )

    assert response.status_code == 200
    assert response.json()["items"] == [{"name": "Apple Juice", "quantity": 1, "price": "2.50"}]


def test_parse_rejects_missing_text() -> None:
    assert client.post("/parse", json={"txt": "Milk 1.99"}).status_code == 400
    assert client.post("/parse", json=["Milk 1.99"]).status_code == 400
    assert client.post("/parse", json={"text": 42}).status_code == 400
    bad = client.post("/parse", content=b"{not json", headers={"content-type": "application/json"})
    assert bad.status_code == 400
    assert bad.json()["status"] == "error"


def test_health() -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_parse_reports_invalid_project_rules_as_json(tmp_path: Path) -> None:
    rules = tmp_path / "config" / "parser_rules.toml"
    rules.parent.mkdir()
    rules.write_text("[aggregator]\nmax_items = -1\n", encoding="utf-8")

    response = client.post("/parse", json={"text": "Milk 2L      1.99"})

    assert response.status_code == 500
    body = response.json()
    assert body["status"] == "error"
    assert "max_items must not be negative" in body["message"]


def test_lifespan_tolerates_invalid_rules_and_serves_health(tmp_path: Path) -> None:
    rules = tmp_path / "config" / "parser_rules.toml"
    rules.parent.mkdir()
    rules.write_text("[aggregator]\nmax_items = -1\n", encoding="utf-8")

    with TestClient(app) as started:
        assert started.get("/health").json() == {"status": "ok"}
        assert started.post("/parse", json={"text": "Milk 2L      1.99"}).status_code == 500
