"""Shared pytest fixtures for ssvv tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from ssvv_cli.models import SemanticModel

# =============================================================================
# Fixture Directory Access
# =============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def valid_basic_yaml(fixtures_dir: Path) -> Path:
    """Minimal valid model: one table with one dimension."""
    return fixtures_dir / "valid_basic.yaml"


@pytest.fixture
def valid_with_relationships_yaml(fixtures_dir: Path) -> Path:
    """Two tables, a relationship, a verified query and a model-level metric."""
    return fixtures_dir / "valid_with_relationships.yaml"


@pytest.fixture
def valid_legacy_instructions_yaml(fixtures_dir: Path) -> Path:
    """Valid model that only uses the deprecated custom_instructions field."""
    return fixtures_dir / "valid_legacy_instructions.yaml"


@pytest.fixture
def invalid_yaml_syntax_yaml(fixtures_dir: Path) -> Path:
    """File with broken YAML indentation."""
    return fixtures_dir / "invalid_yaml_syntax.yaml"


# =============================================================================
# In-Memory Documents
# =============================================================================


@pytest.fixture
def minimal_document() -> dict[str, Any]:
    """A fresh, valid parsed document that tests may modify."""
    return {
        "name": "m",
        "description": "Minimal model",
        "tables": [
            {
                "name": "orders",
                "base_table": {"database": "DB", "schema": "PUBLIC", "table": "ORDERS"},
                "dimensions": [{"name": "order_id", "expr": "ORDER_ID"}],
            }
        ],
    }


@pytest.fixture
def minimal_model(minimal_document: dict[str, Any]) -> SemanticModel:
    """The minimal document as a SemanticModel."""
    return SemanticModel.from_dict(minimal_document)
