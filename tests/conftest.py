"""Pytest configuration for udlconv test suite."""

import sys
from pathlib import Path

import pytest

# Add repo root to path for udlconv imports without installing
sys.path.insert(0, str(Path(__file__).parent.parent))

from udlconv.collector import InterfaceCollector  # noqa: E402
from udlconv.options import ConverterOptions  # noqa: E402

NAMESPACE = "test"
CRATE_NAME = "crate_name"


@pytest.fixture
def ci() -> InterfaceCollector:
    """Fresh collector for one compilation unit."""
    return InterfaceCollector(CRATE_NAME, namespace=NAMESPACE)


@pytest.fixture
def strict_ci() -> InterfaceCollector:
    """Collector that rejects repeated variant names."""
    return InterfaceCollector(
        CRATE_NAME,
        namespace=NAMESPACE,
        options=ConverterOptions(strict_variant_names=True),
    )
