"""Error types raised by term construction and reduction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from lambdaq0.typed.types import TypeExpr


class LambdaError(Exception):
    """Base class for errors reported by the engines."""


@dataclass
class TypeMismatchError(LambdaError, TypeError):
    """Typed application whose operand does not fit the operator's domain."""

    operator_type: TypeExpr
    operand_type: TypeExpr

    def __str__(self) -> str:
        from lambdaq0.typed.types import type_str

        return (
            "Application type mismatch:\n"
            f"  operator type = {type_str(self.operator_type)}\n"
            f"  operand type = {type_str(self.operand_type)}"
        )


@dataclass
class NonTerminationError(LambdaError, RecursionError):
    """Beta-normalization gave up; ``term`` is the last term reached."""

    term: Any
    steps: int
    max_steps: int

    def __str__(self) -> str:
        try:
            shown = str(self.term)
        except RecursionError:
            shown = "<too deeply nested to print>"
        return (
            f"Beta reduction failed to terminate after {self.steps} steps "
            f"(limit {self.max_steps}):\n"
            f"  term = {shown}"
        )


@dataclass
class BoundVariableError(LambdaError, ValueError):
    """A bound variable was used where a free one is required."""

    name: str

    def __str__(self) -> str:
        return f"Cannot abstract over bound variable {self.name!r}"


__all__ = [
    "LambdaError",
    "TypeMismatchError",
    "NonTerminationError",
    "BoundVariableError",
]
