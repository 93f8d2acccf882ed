"""Well-formed formulas: typed variables, constants, applications and lambdas.

The type of a compound formula is computed from its components and never
stored, and ``Application`` checks its operand when it is built, so every
``Wff`` that exists is well typed.
"""

from __future__ import annotations

from dataclasses import dataclass

from lambdaq0.errors import TypeMismatchError
from lambdaq0.names import NameSupply
from lambdaq0.typed.types import Fn, TypeExpr, is_fn_type, type_equal


@dataclass(frozen=True)
class Variable:
    name: str
    ty: TypeExpr

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Constant:
    name: str
    ty: TypeExpr

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Application:
    """``operator`` applied to ``operand``.

    Raises:
        TypeMismatchError: ``operator`` is not a function whose domain is the
            type of ``operand``.
    """

    operator: Wff
    operand: Wff

    def __post_init__(self) -> None:
        op_ty = self.operator.ty
        if not is_fn_type(op_ty) or not type_equal(op_ty.dom, self.operand.ty):
            raise TypeMismatchError(op_ty, self.operand.ty)

    @property
    def ty(self) -> TypeExpr:
        op_ty = self.operator.ty
        assert is_fn_type(op_ty)
        return op_ty.cod

    @property
    def name(self) -> str:
        return f"[{self.operator.name}({self.operand.name})]"

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Abstraction:
    """``λvar.body`` of type ``(var.ty, body.ty)``."""

    var: Variable
    body: Wff

    def __post_init__(self) -> None:
        if not isinstance(self.var, Variable):
            raise TypeError(f"Lambda must bind a variable, got {self.var!r}")

    @property
    def ty(self) -> TypeExpr:
        return Fn(self.var.ty, self.body.ty)

    @property
    def name(self) -> str:
        return f"[λ{self.var.name}.{self.body.name}]"

    def __str__(self) -> str:
        return self.name


type Wff = Variable | Constant | Application | Abstraction


def apply(operator: Wff, *operands: Wff) -> Wff:
    """Apply ``operands`` to ``operator`` left-associatively, checking types."""

    if not operands:
        raise ValueError("apply needs at least one operand")
    result = operator
    for operand in operands:
        result = Application(result, operand)
    return result


def abstract(var: Variable, body: Wff) -> Abstraction:
    return Abstraction(var, body)


class VariableSupply:
    """Mints typed variables ``x_1``, ``x_2``, ... with distinct names."""

    def __init__(self, names: NameSupply | None = None, prefix: str = "x_") -> None:
        self._names = names or NameSupply()
        self._prefix = prefix

    def __call__(self, ty: TypeExpr) -> Variable:
        return Variable(self._names.fresh(self._prefix), ty)


__all__ = [
    "Wff",
    "Variable",
    "Constant",
    "Application",
    "Abstraction",
    "apply",
    "abstract",
    "VariableSupply",
]
