from __future__ import annotations

from web import create_app


def main() -> None:
    app = create_app(seed=7)
    client = app.test_client()

    # new game against the strongest CPU
    resp = client.post("/api/new", json={"mode": "hard"})
    assert resp.status_code == 200, resp.data
    data = resp.get_json()
    assert "board" in data and "legal_moves" in data

    # make a move and have AI reply
    resp = client.post("/api/move", json={"row": 2, "col": 3})
    assert resp.status_code == 200, resp.data
    data = resp.get_json()
    assert data["ai_moves"]
    print("Smoke OK. AI replied:", data["ai_moves"][0])


if __name__ == "__main__":
    main()
