"""Axioms of Q0 as formulas of type ``Ω``."""

from __future__ import annotations

from lambdaq0.typed.logic import IOTA, Logic, equality, equals
from lambdaq0.typed.types import IND, OMEGA, Fn, TypeExpr
from lambdaq0.typed.wff import Wff, apply


def axiom_1(logic: Logic) -> Wff:
    """``g T ∧ g F = Π g``: a truth function true at both values is true everywhere."""

    g = logic.var(Fn(OMEGA, OMEGA))
    x = logic.var(OMEGA)
    both = logic.and_(apply(g, logic.true), apply(g, logic.false))
    return equals(both, apply(logic.forall(x), g))


def axiom_2(logic: Logic, alpha: TypeExpr) -> Wff:
    """``x = y ⊃ h x = h y`` for ``x, y`` of type ``alpha``."""

    x = logic.var(alpha)
    y = logic.var(alpha)
    h = logic.var(Fn(alpha, OMEGA))
    return logic.if_then(equals(x, y), equals(apply(h, x), apply(h, y)))


def axiom_3(logic: Logic, alpha: TypeExpr, beta: TypeExpr) -> Wff:
    """Extensionality: ``(f = g) = ∀x. f x = g x`` for ``f, g : (beta, alpha)``."""

    f = logic.var(Fn(beta, alpha))
    g = logic.var(Fn(beta, alpha))
    x = logic.var(beta)
    pointwise = logic.for_all(x, equals(apply(f, x), apply(g, x)))
    return equals(equals(f, g), pointwise)


def axiom_5(logic: Logic) -> Wff:
    """``ι (Q y) = y``: the description of "equal to y" is ``y``."""

    y = logic.var(IND)
    return equals(apply(IOTA, apply(equality(IND), y)), y)


__all__ = ["axiom_1", "axiom_2", "axiom_3", "axiom_5"]
