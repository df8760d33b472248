"""
==============================================================================
API Integration Tests
==============================================================================

Tests for REST API endpoints.

==============================================================================
"""

from fastapi.testclient import TestClient

from glassfit.config import DEFAULT_CATEGORY


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client: TestClient):
        """Test health check reports the loaded catalog."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["details"]["products_loaded"] == 4
        assert data["details"]["models_loaded"] == 8

    def test_health_without_catalog(self, unloaded_client: TestClient):
        """Test health check degrades when no catalog is loaded."""
        data = unloaded_client.get("/api/v1/health").json()
        assert data["status"] == "degraded"
        assert data["components"]["catalog"] == "not_loaded"

    def test_readiness_probe(self, client: TestClient, unloaded_client: TestClient):
        """Test readiness follows catalog state."""
        assert client.get("/api/v1/health/ready").json()["ready"] is True
        assert unloaded_client.get("/api/v1/health/ready").json()["ready"] is False

    def test_liveness_probe(self, client: TestClient):
        """Test liveness probe."""
        response = client.get("/api/v1/health/live")
        assert response.status_code == 200
        assert response.json()["alive"] is True


class TestSearchEndpoints:
    """Tests for autocomplete and keyword search endpoints."""

    def test_autocomplete(self, client: TestClient):
        response = client.get("/api/v1/mobiles", params={"q": "13", "limit": 2})
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["mobiles"] == ["iPhone 13", "iPhone 13 mini"]
        assert data["total"] == 2

    def test_autocomplete_blank_query(self, client: TestClient):
        data = client.get("/api/v1/mobiles", params={"q": "  "}).json()
        assert data["mobiles"] == []

    def test_autocomplete_rejects_bad_limit(self, client: TestClient):
        response = client.get("/api/v1/mobiles", params={"q": "13", "limit": 0})
        assert response.status_code == 422

    def test_search(self, client: TestClient):
        data = client.get("/api/v1/search", params={"q": "13 pro"}).json()
        assert data["query"] == "13 pro"
        assert data["mobiles"] == ["iPhone 13 Pro", "iPhone 13 Pro Max"]
        assert data["products"][0] == {
            "boxCode": "UNIPRO H01",
            "title": "Tempered Glass for iPhone 13",
            "matchedMobiles": ["iPhone 13 Pro"],
        }

    def test_search_without_query(self, client: TestClient):
        data = client.get("/api/v1/search").json()
        assert data["mobiles"] == []
        assert data["products"] == []


class TestProductEndpoints:
    """Tests for product catalog endpoints."""

    def test_list_products(self, client: TestClient):
        data = client.get("/api/v1/products").json()
        assert data["total"] == 4
        assert data["products"][0] == {
            "boxCode": "UNIPRO H01",
            "title": "Tempered Glass for iPhone 13",
            "mobileCount": 2,
        }

    def test_products_for_mobile(self, client: TestClient):
        data = client.get("/api/v1/products/for-mobile", params={"model": "iphone 14"}).json()
        assert [p["boxCode"] for p in data["products"]] == ["UNIPRO H02", "UNIPRO P01"]
        assert data["products"][0]["category"] == DEFAULT_CATEGORY

    def test_get_product_case_insensitive(self, client: TestClient):
        response = client.get("/api/v1/products/unipro%20s10")
        assert response.status_code == 200
        product = response.json()["product"]
        assert product["boxCode"] == "UNIPRO S10"
        assert product["mobiles"] == ["Galaxy S23"]

    def test_get_product_not_found(self, client: TestClient):
        response = client.get("/api/v1/products/UNIPRO%20X99")
        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == "PRODUCT_NOT_FOUND"

    def test_catalog_not_loaded(self, unloaded_client: TestClient):
        response = unloaded_client.get("/api/v1/products")
        assert response.status_code == 503
        assert response.json()["error"]["code"] == "CATALOG_NOT_LOADED"


class TestDeviceEndpoints:
    """Tests for device detection endpoints."""

    def test_detect(self, client: TestClient):
        data = client.get(
            "/api/v1/devices/detect", params={"width": 390, "height": 844, "ratio": 3}
        ).json()
        assert data["resolution"] == "1170x2532"
        assert "iPhone 13" in data["models"]

    def test_detect_unknown(self, client: TestClient):
        data = client.get("/api/v1/devices/detect", params={"width": 500, "height": 500}).json()
        assert data["models"] == ["unknown"]

    def test_list_devices(self, client: TestClient):
        devices = client.get("/api/v1/devices").json()["devices"]
        assert len(devices) == 11
        assert devices[0]["resolution"] == "1125x2436"
