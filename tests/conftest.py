"""Pytest configuration and shared fixtures."""
import pytest
from fastapi.testclient import TestClient

from app.domain.services import PricingService
from app.infrastructure.catalog import StaticDiscountRepository, StaticPriceCatalog
from app.wiring.dependencies import reset_dependencies


@pytest.fixture
def price_catalog():
    """Catalog with the published price lists."""
    return StaticPriceCatalog()


@pytest.fixture
def discount_repository():
    """Repository with the published discount rules."""
    return StaticDiscountRepository()


@pytest.fixture
def pricing_service(price_catalog, discount_repository):
    """Pricing service wired to the published tables."""
    return PricingService(
        price_catalog=price_catalog,
        discount_repository=discount_repository,
    )


@pytest.fixture
def test_client():
    """FastAPI test client with fresh singletons."""
    from app.main import app

    reset_dependencies()
    yield TestClient(app)
    reset_dependencies()
