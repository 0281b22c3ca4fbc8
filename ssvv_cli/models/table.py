"""Table entity and its physical source reference."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ssvv_cli.models._fields import (
    entity_list,
    expect_mapping,
    join_path,
    optional_entity,
    optional_str,
    optional_str_list,
    require_str,
)
from ssvv_cli.models.columns import ColumnBase, Dimension, Fact, Filter, Metric, TimeDimension


@dataclass(frozen=True)
class BaseTable:
    """Physical table a logical table reads from.

    Attributes:
        database: Database name.
        schema: Schema name.
        table: Table name.
    """

    database: str
    schema: str
    table: str

    @property
    def location(self) -> str:
        """Fully qualified ``database.schema.table`` name."""
        return f"{self.database}.{self.schema}.{self.table}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {"database": self.database, "schema": self.schema, "table": self.table}

    @classmethod
    def from_dict(cls, data: Any, path: str) -> BaseTable:
        """Create BaseTable from its YAML mapping."""
        data = expect_mapping(data, path)
        return cls(
            database=require_str(data, "database", path),
            schema=require_str(data, "schema", path),
            table=require_str(data, "table", path),
        )


@dataclass(frozen=True)
class PrimaryKey:
    """Columns that uniquely identify a row."""

    columns: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {"columns": list(self.columns)}

    @classmethod
    def from_dict(cls, data: Any, path: str) -> PrimaryKey:
        """Create PrimaryKey from its YAML mapping."""
        data = expect_mapping(data, path)
        columns = optional_str_list(data, "columns", path)
        if columns is None:
            raise ValueError(f"{join_path(path, 'columns')}: missing required field 'columns'")
        return cls(columns=columns)


@dataclass(frozen=True)
class Table:
    """A logical table in the semantic model.

    Attributes:
        name: Logical table name. A missing name reads as "" so the validator
            can report it by index.
        base_table: Physical source of the table.
        description: Human-readable description (optional).
        synonyms: Alternative names (optional).
        primary_key: Primary key columns (optional).
        dimensions: Categorical columns.
        time_dimensions: Temporal columns.
        facts: Numeric columns.
        metrics: Derived calculations.
        filters: Named row restrictions.
    """

    name: str
    base_table: BaseTable
    description: str | None = None
    synonyms: tuple[str, ...] | None = None
    primary_key: PrimaryKey | None = None
    dimensions: tuple[Dimension, ...] = field(default=())
    time_dimensions: tuple[TimeDimension, ...] = field(default=())
    facts: tuple[Fact, ...] = field(default=())
    metrics: tuple[Metric, ...] = field(default=())
    filters: tuple[Filter, ...] = field(default=())

    @property
    def location(self) -> str:
        """Fully qualified location of the physical source."""
        return self.base_table.location

    @property
    def has_columns(self) -> bool:
        """True if the table defines any dimension, time dimension, fact or metric.

        Filters do not count: a table of filters alone has nothing to query.
        """
        return bool(self.dimensions or self.time_dimensions or self.facts or self.metrics)

    def countable_columns(self) -> tuple[ColumnBase, ...]:
        """All entities that count towards description and synonym coverage."""
        return (
            *self.dimensions,
            *self.time_dimensions,
            *self.facts,
            *self.metrics,
            *self.filters,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        result: dict[str, Any] = {"name": self.name}
        if self.description is not None:
            result["description"] = self.description
        if self.synonyms is not None:
            result["synonyms"] = list(self.synonyms)
        result["base_table"] = self.base_table.to_dict()
        if self.primary_key is not None:
            result["primary_key"] = self.primary_key.to_dict()
        for key in ("dimensions", "time_dimensions", "facts", "metrics", "filters"):
            result[key] = [c.to_dict() for c in getattr(self, key)]
        return result

    @classmethod
    def from_dict(cls, data: Any, path: str) -> Table:
        """Create Table from its YAML mapping.

        Args:
            data: Parsed YAML mapping for one table.
            path: Dotted path of the table (e.g. ``tables[0]``).

        Returns:
            Table instance.

        Raises:
            ValueError: If a field has the wrong shape or base_table is missing.
        """
        data = expect_mapping(data, path)
        if data.get("base_table") is None:
            raise ValueError(
                f"{join_path(path, 'base_table')}: missing required field 'base_table'"
            )
        return cls(
            name=optional_str(data, "name", path) or "",
            base_table=BaseTable.from_dict(data["base_table"], join_path(path, "base_table")),
            description=optional_str(data, "description", path),
            synonyms=optional_str_list(data, "synonyms", path),
            primary_key=optional_entity(data, "primary_key", path, PrimaryKey.from_dict),
            dimensions=entity_list(data, "dimensions", path, Dimension.from_dict),
            time_dimensions=entity_list(data, "time_dimensions", path, TimeDimension.from_dict),
            facts=entity_list(data, "facts", path, Fact.from_dict),
            metrics=entity_list(data, "metrics", path, Metric.from_dict),
            filters=entity_list(data, "filters", path, Filter.from_dict),
        )
