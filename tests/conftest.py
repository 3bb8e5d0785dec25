"""
Pytest configuration and fixtures for sales-stats-pipeline tests

Provides a fixed "now", seeded date synthesis and record factories so
date filters are deterministic.
"""
import json
import os
import random
from datetime import datetime, timedelta, timezone

import pytest

from src.core.dates import DateSynthesizer
from src.core.models import AnalyticRecord


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for a single pipeline stage"
    )
    config.addinivalue_line(
        "markers", "integration: Tests running a full session or the CLI"
    )


# =======================
# TIME FIXTURES
# =======================

FIXED_NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """Anchor instant shared by synthesizers and relative filters"""
    return FIXED_NOW


@pytest.fixture
def seeded_synthesizer(now) -> DateSynthesizer:
    return DateSynthesizer(rng=random.Random(1234), now=now)


# =======================
# RECORD FIXTURES
# =======================

def make_record(record_id, total, days_ago=0, product_count=1, now=FIXED_NOW) -> AnalyticRecord:
    """Build an AnalyticRecord dated a whole number of days before now"""
    return AnalyticRecord(
        id=record_id,
        total=total,
        product_count=product_count,
        date=now - timedelta(days=days_ago),
    )


@pytest.fixture
def record_factory():
    return make_record


def raw_cart(cart_id, total, products=1, units=None) -> dict:
    """Build a raw cart shaped like the demo carts API"""
    return {
        "id": cart_id,
        "products": [{"id": n, "title": f"Item {n}", "quantity": 1} for n in range(products)],
        "total": total,
        "totalProducts": products if units is None else units,
    }


@pytest.fixture
def raw_cart_factory():
    return raw_cart


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture(scope="session")
def test_data_dir() -> str:
    """Path to tests/fixtures"""
    return os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture(scope="session")
def carts_path(test_data_dir) -> str:
    return os.path.join(test_data_dir, "carts.json")


@pytest.fixture(scope="session")
def sample_carts(carts_path) -> list[dict]:
    with open(carts_path) as f:
        return json.load(f)["carts"]
