"""Integration tests for the pricing API routes."""
from fastapi import status

from app.domain.services import PricingService
from app.infrastructure.catalog import StaticDiscountRepository, StaticPriceCatalog
from app.infrastructure.catalog.static_price_catalog import DEFAULT_PRICE_LISTS


class TestPriceRoute:
    """Test POST /api/v1/price."""

    def test_price_with_discount(self, test_client):
        """Test pricing a bundle that earns a discount."""
        response = test_client.post(
            "/api/v1/price",
            json={"selected_services": ["Photography", "VideoRecording"], "selected_year": 2021},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["base_price"] == 3600
        assert data["final_price"] == 2300
        assert data["savings"] == 1300
        assert data["applied_discount"]["name"] == "PhotographyVideoRecording"
        assert data["applied_discount"]["required_services"] == ["Photography", "VideoRecording"]

    def test_price_without_discount(self, test_client):
        response = test_client.post(
            "/api/v1/price",
            json={"selected_services": ["BlurayPackage"], "selected_year": 2020},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["base_price"] == 300
        assert data["final_price"] == 300
        assert data["applied_discount"] is None

    def test_empty_selection(self, test_client):
        response = test_client.post("/api/v1/price", json={"selected_year": 2022})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["final_price"] == 0

    def test_unsupported_year(self, test_client):
        """Test that an unsupported year is rejected by validation."""
        response = test_client.post(
            "/api/v1/price",
            json={"selected_services": ["Photography"], "selected_year": 2030},
        )

        assert response.status_code == 422

    def test_unknown_service(self, test_client):
        response = test_client.post(
            "/api/v1/price",
            json={"selected_services": ["Drone"], "selected_year": 2021},
        )

        assert response.status_code == 422


class TestSelectionRoute:
    """Test POST /api/v1/selection."""

    def test_select_bluray_blocked(self, test_client):
        response = test_client.post(
            "/api/v1/selection",
            json={
                "previous_selection": ["VideoRecording"],
                "action": {"type": "Select", "service": "BlurayPackage"},
            },
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["selected_services"] == ["VideoRecording"]

    def test_deselect_photography(self, test_client):
        response = test_client.post(
            "/api/v1/selection",
            json={
                "previous_selection": ["Photography", "TwoDayEvent"],
                "action": {"type": "Deselect", "service": "Photography"},
            },
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["selected_services"] == []

    def test_unknown_action_type(self, test_client):
        response = test_client.post(
            "/api/v1/selection",
            json={"previous_selection": [], "action": {"type": "Toggle", "service": "Photography"}},
        )

        assert response.status_code == 422


class TestCatalogRoutes:
    """Test catalog browsing endpoints."""

    def test_get_price_list(self, test_client):
        response = test_client.get("/api/v1/catalog/2022")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["year"] == 2022
        assert data["prices"]["Photography"] == 1900
        assert data["prices"]["WeddingSession"] == 600

    def test_get_price_list_not_found(self, test_client):
        response = test_client.get("/api/v1/catalog/2019")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_list_all_discounts(self, test_client):
        response = test_client.get("/api/v1/discounts")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["total"] == 12

    def test_list_discounts_for_year(self, test_client):
        response = test_client.get("/api/v1/discounts", params={"year": 2020})

        data = response.json()
        assert data["total"] == 4
        assert all(d["for_year"] == 2020 for d in data["discounts"])

    def test_list_discounts_for_unknown_year(self, test_client):
        response = test_client.get("/api/v1/discounts", params={"year": 1990})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["total"] == 0

    def test_health(self, test_client):
        response = test_client.get("/api/v1/health")

        data = response.json()
        assert data["status"] == "ok"
        assert data["supported_years"] == [2020, 2021, 2022]
        assert data["overall"] is True

    def test_root(self, test_client):
        response = test_client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["health"] == "/api/v1/health"


class TestDegradedCatalog:
    """Test routes against an incomplete catalog."""

    def test_health_reports_discount_count(self, test_client):
        data = test_client.get("/api/v1/health").json()

        assert data["discount_count"] == 12
        assert data["components"] == {"price_catalog": True, "discount_rules": True}

    def test_health_degraded_without_tables(self, test_client):
        """Test that empty tables are reported as degraded."""
        from app.main import app
        from app.wiring.dependencies import get_discount_repository, get_price_catalog

        app.dependency_overrides[get_price_catalog] = lambda: StaticPriceCatalog(price_lists=[])
        app.dependency_overrides[get_discount_repository] = lambda: StaticDiscountRepository(discounts=[])
        try:
            data = test_client.get("/api/v1/health").json()
        finally:
            app.dependency_overrides.clear()

        assert data["status"] == "degraded"
        assert data["components"] == {"price_catalog": False, "discount_rules": False}
        assert data["supported_years"] == []
        assert data["overall"] is False

    def test_missing_price_list_is_server_error(self, test_client):
        """Test that a year missing from the catalog maps to 500."""
        from app.main import app
        from app.wiring.dependencies import get_pricing_service

        catalog = StaticPriceCatalog(price_lists=DEFAULT_PRICE_LISTS[:1])
        service = PricingService(catalog, StaticDiscountRepository(discounts=[]))
        app.dependency_overrides[get_pricing_service] = lambda: service
        try:
            response = test_client.post(
                "/api/v1/price",
                json={"selected_services": ["Photography"], "selected_year": 2021},
            )
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert "No price list for year" in response.json()["detail"]
