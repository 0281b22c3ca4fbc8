"""Column-like entities attached to a table.

Dimensions, time dimensions, facts, metrics and filters share one core
shape (name, expr, data_type, description, synonyms, sample_values) and add
a few entity-specific fields each.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from ssvv_cli.models._fields import (
    expect_mapping,
    optional_bool,
    optional_entity,
    optional_str,
    optional_str_list,
    require_str,
)


def _plain(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_plain(v) for v in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


@dataclass(frozen=True)
class ColumnBase:
    """Fields shared by every column-like entity.

    Attributes:
        name: Logical column name.
        expr: Source expression (a column name or SQL snippet).
        data_type: Declared data type (optional).
        description: Human-readable description (optional).
        synonyms: Alternative names users might ask for (optional).
        sample_values: Example values, stringified (optional).
    """

    name: str
    expr: str
    data_type: str | None = None
    description: str | None = None
    synonyms: tuple[str, ...] | None = None
    sample_values: tuple[str, ...] | None = None

    @property
    def is_described(self) -> bool:
        """True if the column carries a non-empty description."""
        return bool(self.description)

    @property
    def is_aliased(self) -> bool:
        """True if the column has at least one synonym."""
        return bool(self.synonyms)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict.

        Returns:
            Dict with non-None fields only.
        """
        return {
            f.name: _plain(getattr(self, f.name))
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    @staticmethod
    def _common(data: dict[str, Any], path: str) -> dict[str, Any]:
        return {
            "name": require_str(data, "name", path),
            "expr": require_str(data, "expr", path),
            "data_type": optional_str(data, "data_type", path),
            "description": optional_str(data, "description", path),
            "synonyms": optional_str_list(data, "synonyms", path),
            "sample_values": optional_str_list(data, "sample_values", path),
        }


@dataclass(frozen=True)
class CortexSearchService:
    """Search service backing literal lookups for a dimension."""

    service: str
    literal_column: str | None = None
    database: str | None = None
    schema: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict with non-None fields only."""
        result: dict[str, Any] = {"service": self.service}
        for key in ("literal_column", "database", "schema"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        return result

    @classmethod
    def from_dict(cls, data: Any, path: str) -> CortexSearchService:
        """Create CortexSearchService from its YAML mapping."""
        data = expect_mapping(data, path)
        return cls(
            service=require_str(data, "service", path),
            literal_column=optional_str(data, "literal_column", path),
            database=optional_str(data, "database", path),
            schema=optional_str(data, "schema", path),
        )


@dataclass(frozen=True)
class Dimension(ColumnBase):
    """A categorical column used for grouping and filtering."""

    unique: bool | None = None
    is_enum: bool | None = None
    cortex_search_service: CortexSearchService | None = None

    @classmethod
    def from_dict(cls, data: Any, path: str) -> Dimension:
        """Create Dimension from its YAML mapping."""
        data = expect_mapping(data, path)
        return cls(
            **cls._common(data, path),
            unique=optional_bool(data, "unique", path),
            is_enum=optional_bool(data, "is_enum", path),
            cortex_search_service=optional_entity(
                data, "cortex_search_service", path, CortexSearchService.from_dict
            ),
        )


@dataclass(frozen=True)
class TimeDimension(ColumnBase):
    """A date or timestamp column used for temporal grouping."""

    unique: bool | None = None

    @classmethod
    def from_dict(cls, data: Any, path: str) -> TimeDimension:
        """Create TimeDimension from its YAML mapping."""
        data = expect_mapping(data, path)
        return cls(**cls._common(data, path), unique=optional_bool(data, "unique", path))


@dataclass(frozen=True)
class Fact(ColumnBase):
    """A numeric column meant for aggregation."""

    unique: bool | None = None
    aggregation: str | None = None
    access_modifier: str | None = None

    @classmethod
    def from_dict(cls, data: Any, path: str) -> Fact:
        """Create Fact from its YAML mapping."""
        data = expect_mapping(data, path)
        return cls(
            **cls._common(data, path),
            unique=optional_bool(data, "unique", path),
            aggregation=optional_str(data, "aggregation", path),
            access_modifier=optional_str(data, "access_modifier", path),
        )


@dataclass(frozen=True)
class Metric(ColumnBase):
    """A derived calculation, defined on a table or on the whole model."""

    aggregation: str | None = None
    access_modifier: str | None = None

    @classmethod
    def from_dict(cls, data: Any, path: str) -> Metric:
        """Create Metric from its YAML mapping."""
        data = expect_mapping(data, path)
        return cls(
            **cls._common(data, path),
            aggregation=optional_str(data, "aggregation", path),
            access_modifier=optional_str(data, "access_modifier", path),
        )


@dataclass(frozen=True)
class Filter(ColumnBase):
    """A named row restriction."""

    comments: str | None = None

    @classmethod
    def from_dict(cls, data: Any, path: str) -> Filter:
        """Create Filter from its YAML mapping."""
        data = expect_mapping(data, path)
        return cls(**cls._common(data, path), comments=optional_str(data, "comments", path))
