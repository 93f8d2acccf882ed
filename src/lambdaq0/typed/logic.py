"""Logical constants of Q0 defined from equality, application and lambda.

Only construction and type checking happen here: ``truth()`` is a formula of
type ``Ω``, not a Python boolean.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import cache, cached_property

from lambdaq0.typed.types import IND, OMEGA, Fn, TypeExpr, fn_type, type_str
from lambdaq0.typed.wff import Constant, Variable, VariableSupply, Wff, abstract, apply

logger = logging.getLogger(__name__)


@cache
def equality(alpha: TypeExpr) -> Constant:
    """The equality constant ``Q_α`` of type ``(α, (α, Ω))``.

    Equal type expressions always get the same constant object.
    """

    logger.debug("new equality constant at %s", type_str(alpha))
    return Constant(f"[Q_{type_str(alpha)}]", fn_type(alpha, alpha, OMEGA))


def equals(a: Wff, b: Wff) -> Wff:
    """``a = b``, using the equality constant at the type of ``a``."""

    return apply(equality(a.ty), a, b)


# Description operator: maps a predicate on individuals to an individual.
IOTA = Constant("Iota", Fn(Fn(IND, OMEGA), IND))


@cache
def truth() -> Wff:
    """``T``: the equality ``Q_Ω = Q_Ω``."""

    q = equality(OMEGA)
    return equals(q, q)


@dataclass
class Logic:
    """Derived connectives and quantifiers over one variable supply.

    Every bound variable used by the definitions comes from ``supply``, so
    formulas built by one ``Logic`` never reuse a variable name by accident.
    """

    supply: VariableSupply = field(default_factory=VariableSupply)

    def var(self, ty: TypeExpr) -> Variable:
        return self.supply(ty)

    @property
    def true(self) -> Wff:
        return truth()

    @cached_property
    def false(self) -> Wff:
        """``F``: the constantly-true function equals the identity on ``Ω``."""

        x = self.var(OMEGA)
        return equals(abstract(x, truth()), abstract(x, x))

    def forall(self, x: Variable) -> Wff:
        """``Π`` at the type of ``x``, of type ``((α, Ω), Ω)``.

        The result holds of a predicate exactly when the predicate equals the
        predicate that is true everywhere.
        """

        return apply(equality(Fn(x.ty, OMEGA)), abstract(x, truth()))

    def for_all(self, x: Variable, body: Wff) -> Wff:
        return apply(self.forall(x), abstract(x, body))

    def exists(self, x: Variable, body: Wff) -> Wff:
        return self.not_(self.for_all(x, self.not_(body)))

    @cached_property
    def conj(self) -> Wff:
        """``λx.λy.[λg.g x y = λg.g T T]``."""

        g = self.var(fn_type(OMEGA, OMEGA, OMEGA))
        x = self.var(OMEGA)
        y = self.var(OMEGA)
        left = abstract(g, apply(g, x, y))
        right = abstract(g, apply(g, truth(), truth()))
        return abstract(x, abstract(y, equals(left, right)))

    @cached_property
    def implies(self) -> Wff:
        """``λx.λy.[x ∧ y = x]``."""

        x = self.var(OMEGA)
        y = self.var(OMEGA)
        return abstract(x, abstract(y, equals(self.and_(x, y), x)))

    @cached_property
    def neg(self) -> Wff:
        return apply(equality(OMEGA), self.false)

    @cached_property
    def disj(self) -> Wff:
        """``λx.λy.~[~x ∧ ~y]``."""

        x = self.var(OMEGA)
        y = self.var(OMEGA)
        return abstract(
            x, abstract(y, self.not_(self.and_(self.not_(x), self.not_(y))))
        )

    def and_(self, a: Wff, b: Wff) -> Wff:
        return apply(self.conj, a, b)

    def if_then(self, a: Wff, b: Wff) -> Wff:
        return apply(self.implies, a, b)

    def not_(self, a: Wff) -> Wff:
        return apply(self.neg, a)

    def or_(self, a: Wff, b: Wff) -> Wff:
        return apply(self.disj, a, b)


__all__ = ["equality", "equals", "IOTA", "truth", "Logic"]
