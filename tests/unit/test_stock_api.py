"""Unit tests for stock API endpoints."""


NEW_STOCK = {
    "name": "Truffle Oil",
    "category": "Pantry",
    "quantity": 4,
    "unit": "bottles",
    "min_threshold": 2,
    "max_threshold": 10,
    "supplier": "Fine Foods",
    "cost_per_unit": 30.0,
}


class TestStockAPI:
    """Test stock ledger endpoints."""

    def test_list_stock(self, test_client):
        response = test_client.get("/api/stock")

        assert response.status_code == 200
        assert len(response.json()) == 4

    def test_list_by_category(self, test_client):
        data = test_client.get("/api/stock", params={"category": "Seafood"}).json()
        assert [i["id"] for i in data] == ["STK-002", "STK-004"]

    def test_low_and_out(self, test_client):
        assert [i["id"] for i in test_client.get("/api/stock/low").json()] == ["STK-002"]
        assert [i["id"] for i in test_client.get("/api/stock/out").json()] == ["STK-003"]

    def test_add_stock(self, test_client):
        response = test_client.post("/api/stock", json=NEW_STOCK)

        assert response.status_code == 200
        assert response.json()["id"] == "STK-005"
        assert len(test_client.get("/api/stock").json()) == 5

    def test_add_stock_validation(self, test_client):
        response = test_client.post("/api/stock", json={**NEW_STOCK, "quantity": -1})
        assert response.status_code == 422

    def test_patch_stock_item(self, test_client):
        response = test_client.patch("/api/stock/STK-001", json={"supplier": "Local Farm"})

        assert response.status_code == 200
        assert response.json()["supplier"] == "Local Farm"
        assert response.json()["quantity"] == 20

    def test_patch_clears_supplier_with_null(self, test_client):
        response = test_client.patch("/api/stock/STK-001", json={"supplier": None})

        assert response.status_code == 200
        assert response.json()["supplier"] is None

    def test_patch_inverted_thresholds_rejected(self, test_client):
        response = test_client.patch("/api/stock/STK-001", json={"max_threshold": 5})

        assert response.status_code == 422
        item = next(i for i in test_client.get("/api/stock").json() if i["id"] == "STK-001")
        assert item["max_threshold"] == 50

    def test_set_quantity(self, test_client):
        response = test_client.put("/api/stock/STK-001/quantity", json={"quantity": -5})
        assert response.json()["quantity"] == 0

    def test_restock(self, test_client):
        """Test restock caps at the maximum threshold and clears the alert."""
        response = test_client.post("/api/stock/STK-002/restock", json={"amount": 20})

        assert response.status_code == 200
        assert response.json()["quantity"] == 15
        alerts = test_client.get("/api/stock/alerts").json()
        assert "STK-002" not in [a["item_id"] for a in alerts]

    def test_restock_requires_positive_amount(self, test_client):
        response = test_client.post("/api/stock/STK-002/restock", json={"amount": 0})
        assert response.status_code == 422

    def test_delete_stock_item(self, test_client):
        response = test_client.delete("/api/stock/STK-003")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert test_client.get("/api/stock/out").json() == []
        assert test_client.delete("/api/stock/STK-003").status_code == 404

    def test_unknown_stock_item(self, test_client):
        assert test_client.patch("/api/stock/STK-999", json={"unit": "kg"}).status_code == 404
        assert test_client.put("/api/stock/STK-999/quantity", json={"quantity": 1}).status_code == 404
        assert test_client.post("/api/stock/STK-999/restock", json={"amount": 1}).status_code == 404


class TestStockAlertsAPI:
    """Test the alert feed endpoints."""

    def test_list_alerts(self, test_client):
        alerts = test_client.get("/api/stock/alerts").json()

        assert {(a["item_id"], a["alert_type"]) for a in alerts} == {
            ("STK-002", "low"),
            ("STK-003", "out"),
        }

    def test_mark_read_and_unread_filter(self, test_client):
        alert_id = test_client.get("/api/stock/alerts").json()[0]["id"]

        response = test_client.post(f"/api/stock/alerts/{alert_id}/read")
        assert response.status_code == 200
        assert response.json()["is_read"] is True

        unread = test_client.get("/api/stock/alerts", params={"unread_only": True}).json()
        assert alert_id not in [a["id"] for a in unread]

    def test_mark_unknown_alert(self, test_client):
        assert test_client.post("/api/stock/alerts/ALT-nope/read").status_code == 404

    def test_refresh_alerts(self, test_client):
        test_client.put("/api/stock/STK-001/quantity", json={"quantity": 0})

        alerts = test_client.post("/api/stock/alerts/refresh").json()

        assert "STK-001" in [a["item_id"] for a in alerts]

    def test_clear_alerts(self, test_client):
        response = test_client.delete("/api/stock/alerts")

        assert response.status_code == 200
        assert test_client.get("/api/stock/alerts").json() == []
        # Clearing alerts leaves the stock entries alone
        assert len(test_client.get("/api/stock").json()) == 4
