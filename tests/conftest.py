import os

# Pas de rate limiting pendant les tests (avant l'import de config)
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient

from main import app
from models.common import DeliveryType
from models.pricing import DeliveryRequest
from services.config_service import default_config


@pytest.fixture
def config():
    """Grille par défaut : 15 base, 2/km, 5/kg, zones accra / greater-accra / other-region."""
    return default_config()


@pytest.fixture
def standard_request():
    return DeliveryRequest(weight_kg=1, distance_km=10, delivery_type=DeliveryType.STANDARD)


@pytest.fixture
def client():
    # le lifespan recrée une config neuve à chaque test
    with TestClient(app) as c:
        yield c


@pytest.fixture
def editing_client(client):
    r = client.put("/api/admin/editing", json={"enabled": True})
    assert r.status_code == 200
    return client
