"""Description and synonym coverage of semantic model columns.

Coverage counts dimensions, time dimensions, facts, metrics and filters.
Model-level coverage also counts the model-level metrics. A column is
"described" when it has a non-empty description and "aliased" when it has
at least one synonym.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ssvv_cli.models import ColumnBase, SemanticModel, Table

# Grading thresholds (percent): (good, fair); anything below fair is poor
DESCRIBED_THRESHOLDS: tuple[float, float] = (80.0, 50.0)
ALIASED_THRESHOLDS: tuple[float, float] = (60.0, 30.0)

GRADE_COLORS = ("green", "yellow", "red")


def percentage(count: int, total: int) -> float:
    """count as a percentage of total; 0.0 when total is zero."""
    if total == 0:
        return 0.0
    return count / total * 100.0


@dataclass(frozen=True)
class Coverage:
    """Column counts for one table or a whole model."""

    described: int
    aliased: int
    total: int

    @property
    def described_pct(self) -> float:
        return percentage(self.described, self.total)

    @property
    def aliased_pct(self) -> float:
        return percentage(self.aliased, self.total)

    @classmethod
    def of(cls, columns: Iterable[ColumnBase]) -> Coverage:
        """Count coverage over columns."""
        described = aliased = total = 0
        for column in columns:
            total += 1
            described += column.is_described
            aliased += column.is_aliased
        return cls(described=described, aliased=aliased, total=total)


def table_coverage(table: Table) -> Coverage:
    """Coverage of a single table's columns."""
    return Coverage.of(table.countable_columns())


def model_coverage(model: SemanticModel) -> Coverage:
    """Coverage across every table plus the model-level metrics."""
    return Coverage.of(model.countable_columns())


def grade_color(pct: float, thresholds: tuple[float, float]) -> str:
    """Color name for a percentage: green when good, yellow when fair, else red."""
    good, fair = thresholds
    if pct >= good:
        return GRADE_COLORS[0]
    if pct >= fair:
        return GRADE_COLORS[1]
    return GRADE_COLORS[2]
