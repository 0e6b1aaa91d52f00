"""
Incremental builder for parameterized SELECT statements.

Values never reach the SQL text: every value is bound to a numbered
placeholder (``:p1``, ``:p2``, ...) in the order it was added.
"""
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional

from sqlalchemy import text
from sqlalchemy.sql.elements import TextClause


@dataclass(frozen=True)
class BuiltQuery:
    """Finished statement plus its bind values, in placeholder order."""
    sql: str
    params: Dict[str, Any] = field(default_factory=dict)

    @property
    def statement(self) -> TextClause:
        return text(self.sql)

    @property
    def positional_params(self) -> List[Any]:
        return list(self.params.values())


class QueryBuilder:
    """
    Collects clauses for a single SELECT in SQL order.

    WHERE conditions and HAVING conditions each remember whether their
    keyword has been emitted, so the first condition opens the clause and
    every later one is joined with AND.
    """

    def __init__(self, base: str):
        self._base = " ".join(base.split())
        self._params: Dict[str, Any] = {}
        self._where: List[str] = []
        self._has_where = False
        self._group_by: List[str] = []
        self._having: List[str] = []
        self._has_having = False
        self._order_by: List[str] = []
        self._limit: Optional[str] = None

    def bind(self, value: Any) -> str:
        """Register a value and return its placeholder."""
        name = f"p{len(self._params) + 1}"
        self._params[name] = value
        return f":{name}"

    def where(self, condition: str, value: Any) -> "QueryBuilder":
        """Add ``condition`` with ``{}`` replaced by the bound value's placeholder."""
        keyword = "AND" if self._has_where else "WHERE"
        self._where.append(f"{keyword} {condition.format(self.bind(value))}")
        self._has_where = True
        return self

    def group_by(self, *columns: str) -> "QueryBuilder":
        self._group_by.extend(columns)
        return self

    def having(self, condition: str, value: Any) -> "QueryBuilder":
        keyword = "AND" if self._has_having else "HAVING"
        self._having.append(f"{keyword} {condition.format(self.bind(value))}")
        self._has_having = True
        return self

    def order_by(self, *columns: str) -> "QueryBuilder":
        self._order_by.extend(columns)
        return self

    def limit(self, count: int) -> "QueryBuilder":
        self._limit = self.bind(int(count))
        return self

    @property
    def has_where(self) -> bool:
        return self._has_where

    def build(self) -> BuiltQuery:
        if self._having and not self._group_by:
            raise ValueError("HAVING requires a GROUP BY clause")

        parts = [self._base]
        parts.extend(self._where)
        if self._group_by:
            parts.append("GROUP BY " + ", ".join(self._group_by))
        parts.extend(self._having)
        if self._order_by:
            parts.append("ORDER BY " + ", ".join(self._order_by))
        if self._limit is not None:
            parts.append(f"LIMIT {self._limit}")
        return BuiltQuery(sql=" ".join(parts), params=dict(self._params))


def dollars_to_cents(amount: Any) -> int:
    """Convert a dollar amount (number or numeric string) to integer cents."""
    cents = Decimal(str(amount)) * 100
    return int(cents.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def strip_wrapping(value: str) -> str:
    """Drop exactly one leading and one trailing character."""
    return value[1:-1]
