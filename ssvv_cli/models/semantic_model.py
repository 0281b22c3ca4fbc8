"""SemanticModel: the top-level document.

The model is the root of a semantic model YAML file. It holds the tables,
the relationships between them, verified queries, custom instructions and
model-level metrics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ssvv_cli.models._fields import (
    entity_list,
    expect_mapping,
    optional_bool,
    optional_entity,
    optional_str,
    require_str,
)
from ssvv_cli.models.columns import ColumnBase, Metric
from ssvv_cli.models.relationship import Relationship
from ssvv_cli.models.table import Table


@dataclass(frozen=True)
class ModuleInstructions:
    """Structured custom instructions, split by processing phase.

    Supersedes the free-text ``custom_instructions`` field.

    Attributes:
        question_categorization: Guidance for classifying questions.
        sql_generation: Guidance for generating SQL.
    """

    question_categorization: str | None = None
    sql_generation: str | None = None

    @property
    def is_empty(self) -> bool:
        """True if neither phase has instructions."""
        return self.question_categorization is None and self.sql_generation is None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict with non-None fields only."""
        result: dict[str, Any] = {}
        if self.question_categorization is not None:
            result["question_categorization"] = self.question_categorization
        if self.sql_generation is not None:
            result["sql_generation"] = self.sql_generation
        return result

    @classmethod
    def from_dict(cls, data: Any, path: str) -> ModuleInstructions:
        """Create ModuleInstructions from its YAML mapping."""
        data = expect_mapping(data, path)
        return cls(
            question_categorization=optional_str(data, "question_categorization", path),
            sql_generation=optional_str(data, "sql_generation", path),
        )


@dataclass(frozen=True)
class VerifiedQuery:
    """A natural-language question paired with its known-correct query.

    Verified queries are displayed, never re-validated.
    """

    name: str
    question: str
    sql: str | None = None
    verified_at: str | None = None
    verified_by: str | None = None
    use_as_onboarding_question: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict with non-None fields only."""
        result: dict[str, Any] = {"name": self.name, "question": self.question}
        for key in ("sql", "verified_at", "verified_by", "use_as_onboarding_question"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        return result

    @classmethod
    def from_dict(cls, data: Any, path: str) -> VerifiedQuery:
        """Create VerifiedQuery from its YAML mapping.

        ``verified_query`` is accepted as an older spelling of ``sql``.
        """
        data = expect_mapping(data, path)
        return cls(
            name=require_str(data, "name", path),
            question=require_str(data, "question", path),
            sql=optional_str(data, "sql", path) or optional_str(data, "verified_query", path),
            verified_at=optional_str(data, "verified_at", path),
            verified_by=optional_str(data, "verified_by", path),
            use_as_onboarding_question=optional_bool(data, "use_as_onboarding_question", path),
        )


@dataclass(frozen=True)
class SemanticModel:
    """A semantic model document.

    Attributes:
        name: Model name. A missing name reads as "" so that the validator,
            not the parser, reports it.
        description: Model description.
        comments: Free-text comments (optional).
        tables: Logical tables, in document order.
        relationships: Joins between tables.
        verified_queries: Recorded question/query pairs.
        custom_instructions: Legacy free-text instructions (deprecated).
        module_custom_instructions: Structured instructions.
        metrics: Model-level metrics.
    """

    name: str
    description: str = ""
    comments: str | None = None
    tables: tuple[Table, ...] = field(default=())
    relationships: tuple[Relationship, ...] = field(default=())
    verified_queries: tuple[VerifiedQuery, ...] = field(default=())
    custom_instructions: str | None = None
    module_custom_instructions: ModuleInstructions | None = None
    metrics: tuple[Metric, ...] = field(default=())

    def countable_columns(self) -> tuple[ColumnBase, ...]:
        """Every table's countable entities plus the model-level metrics."""
        columns: list[ColumnBase] = []
        for table in self.tables:
            columns.extend(table.countable_columns())
        columns.extend(self.metrics)
        return tuple(columns)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        result: dict[str, Any] = {"name": self.name, "description": self.description}
        if self.comments is not None:
            result["comments"] = self.comments
        result["tables"] = [t.to_dict() for t in self.tables]
        result["relationships"] = [r.to_dict() for r in self.relationships]
        result["verified_queries"] = [q.to_dict() for q in self.verified_queries]
        if self.custom_instructions is not None:
            result["custom_instructions"] = self.custom_instructions
        if self.module_custom_instructions is not None:
            result["module_custom_instructions"] = self.module_custom_instructions.to_dict()
        result["metrics"] = [m.to_dict() for m in self.metrics]
        return result

    @classmethod
    def from_dict(cls, data: Any, path: str = "") -> SemanticModel:
        """Create SemanticModel from the parsed YAML document.

        Args:
            data: Parsed YAML document (must be a mapping).
            path: Dotted path prefix for error messages (empty at the root).

        Returns:
            SemanticModel instance.

        Raises:
            ValueError: If the document or any nested field has the wrong shape.
        """
        data = expect_mapping(data, path)
        return cls(
            name=optional_str(data, "name", path) or "",
            description=optional_str(data, "description", path) or "",
            comments=optional_str(data, "comments", path),
            tables=entity_list(data, "tables", path, Table.from_dict),
            relationships=entity_list(data, "relationships", path, Relationship.from_dict),
            verified_queries=entity_list(data, "verified_queries", path, VerifiedQuery.from_dict),
            custom_instructions=optional_str(data, "custom_instructions", path),
            module_custom_instructions=optional_entity(
                data, "module_custom_instructions", path, ModuleInstructions.from_dict
            ),
            metrics=entity_list(data, "metrics", path, Metric.from_dict),
        )
