"""Data models for semantic model documents.

This module exports all model classes used throughout ssvv.
Models are frozen dataclasses built from parsed YAML via ``from_dict``
and serializable back with ``to_dict``.
"""

from __future__ import annotations

from ssvv_cli.models.columns import (
    ColumnBase,
    CortexSearchService,
    Dimension,
    Fact,
    Filter,
    Metric,
    TimeDimension,
)
from ssvv_cli.models.relationship import Relationship, RelationshipColumn
from ssvv_cli.models.semantic_model import ModuleInstructions, SemanticModel, VerifiedQuery
from ssvv_cli.models.table import BaseTable, PrimaryKey, Table

__all__ = [
    # Model
    "SemanticModel",
    "ModuleInstructions",
    "VerifiedQuery",
    # Table
    "Table",
    "BaseTable",
    "PrimaryKey",
    # Columns
    "ColumnBase",
    "Dimension",
    "TimeDimension",
    "Fact",
    "Metric",
    "Filter",
    "CortexSearchService",
    # Relationship
    "Relationship",
    "RelationshipColumn",
]
