"""Relationship entity: a declared join between two tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ssvv_cli.models._fields import entity_list, expect_mapping, join_path, require_str


@dataclass(frozen=True)
class RelationshipColumn:
    """One column equality of a join condition."""

    left_column: str
    right_column: str

    @property
    def equality(self) -> str:
        """The condition as ``left = right``."""
        return f"{self.left_column} = {self.right_column}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {"left_column": self.left_column, "right_column": self.right_column}

    @classmethod
    def from_dict(cls, data: Any, path: str) -> RelationshipColumn:
        """Create RelationshipColumn from its YAML mapping."""
        data = expect_mapping(data, path)
        return cls(
            left_column=require_str(data, "left_column", path),
            right_column=require_str(data, "right_column", path),
        )


@dataclass(frozen=True)
class Relationship:
    """A join between two tables.

    Table names are taken as written; whether they refer to tables defined
    in the model is not checked.

    Attributes:
        name: Relationship name.
        left_table: Name of the left-hand table.
        right_table: Name of the right-hand table.
        relationship_columns: Column equalities making up the join condition.
        join_type: Join type (e.g. left_outer, inner).
        relationship_type: Cardinality (e.g. many_to_one).
    """

    name: str
    left_table: str
    right_table: str
    relationship_columns: tuple[RelationshipColumn, ...]
    join_type: str
    relationship_type: str

    @property
    def condition(self) -> str:
        """All column equalities joined with commas."""
        return ", ".join(c.equality for c in self.relationship_columns)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "name": self.name,
            "left_table": self.left_table,
            "right_table": self.right_table,
            "relationship_columns": [c.to_dict() for c in self.relationship_columns],
            "join_type": self.join_type,
            "relationship_type": self.relationship_type,
        }

    @classmethod
    def from_dict(cls, data: Any, path: str) -> Relationship:
        """Create Relationship from its YAML mapping."""
        data = expect_mapping(data, path)
        if data.get("relationship_columns") is None:
            raise ValueError(
                f"{join_path(path, 'relationship_columns')}: "
                "missing required field 'relationship_columns'"
            )
        return cls(
            name=require_str(data, "name", path),
            left_table=require_str(data, "left_table", path),
            right_table=require_str(data, "right_table", path),
            relationship_columns=entity_list(
                data, "relationship_columns", path, RelationshipColumn.from_dict
            ),
            join_type=require_str(data, "join_type", path),
            relationship_type=require_str(data, "relationship_type", path),
        )
