"""
Tests HTTP : calculateur public et configuration admin.

Run with: pytest tests/test_api.py -v
"""
from config import settings


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


# =============================================================================
# CALCULATEUR (public)
# =============================================================================

class TestPricingRouter:

    def test_list_zones(self, client):
        zones = client.get("/api/pricing/zones").json()["zones"]
        assert [z["id"] for z in zones] == ["accra", "greater-accra", "other-region"]

    def test_delivery_types(self, client):
        data = client.get("/api/pricing/delivery-types").json()
        assert data["currency"] == "GHS"
        assert {t["value"]: t["surcharge"] for t in data["delivery_types"]} == {
            "standard": 0.0, "express": 20.0, "same-day": 35.0,
        }

    def test_default_quote(self, client):
        r = client.post("/api/pricing/quote", json={})
        assert r.status_code == 200
        data = r.json()
        assert data["total"] == 40
        assert data["currency"] == "GHS"
        assert data["delivery_type"] == "standard"
        assert data["effective_distance_km"] == 10
        assert data["zone_name"] is None
        assert data["config_version"] == 1
        assert data["breakdown"]["subtotal"] == 40

    def test_express_fragile_quote(self, client):
        data = client.post("/api/pricing/quote", json={
            "weight_kg": 1, "distance_km": 10, "delivery_type": "express", "fragile": True,
        }).json()
        assert data["breakdown"]["type_surcharge"] == 20
        assert data["breakdown"]["extras"] == 5
        assert data["total"] == 65

    def test_zone_quote(self, client):
        data = client.post("/api/pricing/quote", json={
            "weight_kg": 2, "use_zones": True, "zone_id": "greater-accra", "distance_km": 500,
        }).json()
        assert data["effective_distance_km"] == 15
        assert data["zone_name"] == "Greater Accra (outside metro)"
        assert data["breakdown"]["distance_cost"] == 30
        assert data["breakdown"]["zone_fee"] == 10
        assert data["total"] == 65

    def test_bad_inputs_fail_soft(self, client):
        r = client.post("/api/pricing/quote", json={
            "weight_kg": "beaucoup", "distance_km": -4, "delivery_type": "teleport",
        })
        assert r.status_code == 200
        data = r.json()
        assert data["delivery_type"] == "standard"
        assert data["effective_distance_km"] == 0
        assert data["total"] == 15

    def test_unknown_zone_fail_soft(self, client):
        data = client.post("/api/pricing/quote", json={"use_zones": True, "zone_id": "mars"}).json()
        assert data["zone_name"] is None
        assert data["breakdown"]["zone_fee"] == 0
        assert data["breakdown"]["distance_cost"] == 0

    def test_summary_text(self, client):
        r = client.post("/api/pricing/quote/summary", json={"cash_on_delivery": True})
        assert r.status_code == 200
        text = r.json()["text"]
        assert text.startswith("RichDonlurds Shoes Limited – Delivery Quote")
        assert "Cash on Delivery: Yes" in text
        assert "Extras: GHS 3.00" in text
        assert text.endswith("Total: GHS 43.00")

    def test_numeric_delivery_type_is_standard(self, client):
        r = client.post("/api/pricing/quote", json={"delivery_type": 5})
        assert r.status_code == 200
        assert r.json()["delivery_type"] == "standard"
        assert r.json()["total"] == 40

    def test_huge_weight_quote(self, client):
        r = client.post("/api/pricing/quote", json={"weight_kg": "1e308"})
        assert r.status_code == 200
        assert r.json()["breakdown"]["weight_cost"] == settings.MAX_AMOUNT * 5


# =============================================================================
# ADMIN
# =============================================================================

class TestAdminRouter:

    def test_get_config(self, client):
        data = client.get("/api/admin/config").json()
        assert data["editing_enabled"] is False
        assert data["config"]["base_fee"] == 15
        assert len(data["config"]["zones"]) == 3

    def test_mutators_forbidden_when_editing_disabled(self, client):
        assert client.put("/api/admin/rates/base_fee", json={"value": 99}).status_code == 403
        assert client.post("/api/admin/zones").status_code == 403
        assert client.delete("/api/admin/zones/last").status_code == 403
        assert client.patch("/api/admin/zones/accra", json={"field": "name", "value": "X"}).status_code == 403
        assert client.post("/api/admin/config/reset").status_code == 403
        assert client.get("/api/admin/config").json()["config"]["version"] == 1

    def test_toggle_editing(self, client):
        assert client.put("/api/admin/editing", json={"enabled": True}).json()["editing_enabled"] is True
        assert client.put("/api/admin/editing", json={"enabled": False}).json()["editing_enabled"] is False

    def test_update_rate_changes_quotes(self, editing_client):
        r = editing_client.put("/api/admin/rates/per_km", json={"value": 3})
        assert r.status_code == 200
        assert r.json()["applied"] is True
        assert r.json()["config"]["per_km"] == 3
        quote = editing_client.post("/api/pricing/quote", json={}).json()
        assert quote["total"] == 50
        assert quote["config_version"] == 2

    def test_negative_rate_clamped(self, editing_client):
        r = editing_client.put("/api/admin/rates/fragile_surcharge", json={"value": -12})
        assert r.json()["config"]["fragile_surcharge"] == 0

    def test_huge_rate_keeps_quotes_working(self, editing_client):
        r = editing_client.put("/api/admin/rates/per_kg", json={"value": "1e308"})
        assert r.status_code == 200
        assert r.json()["config"]["per_kg"] == settings.MAX_AMOUNT
        r = editing_client.post("/api/pricing/quote", json={"weight_kg": 10})
        assert r.status_code == 200
        assert r.json()["total"] == 15 + 20 + 10 * settings.MAX_AMOUNT

    def test_unknown_rate_field_rejected(self, editing_client):
        assert editing_client.put("/api/admin/rates/tip", json={"value": 1}).status_code == 422

    def test_add_and_edit_zone(self, editing_client):
        r = editing_client.post("/api/admin/zones")
        assert r.status_code == 200
        zone_id = r.json()["detail"]
        assert r.json()["config"]["zones"][-1]["name"] == "New Zone"

        r = editing_client.patch(f"/api/admin/zones/{zone_id}", json={"field": "name", "value": "Kumasi"})
        assert r.json()["applied"] is True
        r = editing_client.patch(f"/api/admin/zones/{zone_id}", json={"field": "surcharge", "value": "40"})
        r = editing_client.patch(f"/api/admin/zones/{zone_id}", json={"field": "approx_km", "value": 250})
        zone = r.json()["config"]["zones"][-1]
        assert zone == {"id": zone_id, "name": "Kumasi", "surcharge": 40.0, "approx_km": 250.0}

        quote = editing_client.post("/api/pricing/quote", json={"use_zones": True, "zone_id": zone_id}).json()
        assert quote["total"] == 15 + 500 + 5 + 40

    def test_edit_unknown_zone_is_noop(self, editing_client):
        r = editing_client.patch("/api/admin/zones/nope", json={"field": "surcharge", "value": 5})
        assert r.status_code == 200
        assert r.json()["applied"] is False
        assert r.json()["config"]["version"] == 1

    def test_unknown_zone_field_rejected(self, editing_client):
        r = editing_client.patch("/api/admin/zones/accra", json={"field": "colour", "value": "red"})
        assert r.status_code == 422

    def test_remove_last_zone_until_refused(self, editing_client):
        assert editing_client.delete("/api/admin/zones/last").status_code == 200
        assert editing_client.delete("/api/admin/zones/last").status_code == 200
        r = editing_client.delete("/api/admin/zones/last")
        assert r.status_code == 409
        assert "dernière zone" in r.json()["detail"]
        zones = editing_client.get("/api/admin/config").json()["config"]["zones"]
        assert [z["id"] for z in zones] == ["accra"]

    def test_reset(self, editing_client):
        editing_client.put("/api/admin/rates/base_fee", json={"value": 100})
        editing_client.delete("/api/admin/zones/last")
        r = editing_client.post("/api/admin/config/reset")
        cfg = r.json()["config"]
        assert cfg["base_fee"] == 15
        assert len(cfg["zones"]) == 3
        assert cfg["version"] == 4
