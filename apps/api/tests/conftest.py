"""
Shared fixtures: in-memory collaborators, sample records and an API client.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from app.core.blobs import MemoryBlobStore, get_blob_store
from app.core.config import settings
from app.core.payments import get_payment_gateway
from app.core.rate_limit import reset_memory_store
from app.core.tabular import MemoryTabularStore, get_tabular_store
from app.modules.records.models import ScreeningRecord


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with empty in-memory rate limit counters."""
    reset_memory_store()
    yield
    reset_memory_store()


@pytest.fixture
def sample_screening():
    """An approved screening with a resume link."""
    return ScreeningRecord(
        submitted_at="2025-06-01T09:30:00.000Z",
        name="Asha Verma",
        email="asha@example.com",
        phone="+919876543210",
        position="Backend Developer",
        duration="3 months",
        enrollment_id="AGP123456",
        resume_link="http://r/1",
        approval_status="approved",
        owner_email="asha.account@example.com",
    )


@pytest.fixture
def memory_store():
    """Create an empty in-memory tabular store."""
    return MemoryTabularStore()


@pytest.fixture
def seeded_store(sample_screening):
    """Create an in-memory tabular store holding one screening."""
    return MemoryTabularStore({settings.screenings_table: [sample_screening.to_row()]})


@pytest.fixture
def memory_blobs():
    """Create an empty in-memory blob store."""
    return MemoryBlobStore()


@pytest.fixture
def mock_gateway():
    """Create a mock payment gateway."""
    gateway = AsyncMock()
    gateway.create_order = AsyncMock(
        return_value={
            "id": "order_Test123",
            "entity": "order",
            "amount": 50000,
            "currency": "INR",
            "receipt": "rcpt_1718000123456",
            "status": "created",
        }
    )
    return gateway


@pytest.fixture
def api_client(seeded_store, memory_blobs, mock_gateway):
    """API client wired to in-memory collaborators. Lifespan does not run."""
    from app.main import app

    app.dependency_overrides[get_tabular_store] = lambda: seeded_store
    app.dependency_overrides[get_blob_store] = lambda: memory_blobs
    app.dependency_overrides[get_payment_gateway] = lambda: mock_gateway

    yield TestClient(app)

    app.dependency_overrides.clear()
