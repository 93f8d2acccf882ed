"""Type expressions of the simple theory of types.

A type is either one of the two base types, individuals ``Ind`` and truth
values ``Ω``, or a function type ``(dom, cod)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeIs


@dataclass(frozen=True)
class Atom:
    """Base type identified by its tag."""

    tag: str

    def __str__(self) -> str:
        return self.tag


@dataclass(frozen=True)
class Fn:
    """Function type from ``dom`` to ``cod``."""

    dom: TypeExpr
    cod: TypeExpr

    def __str__(self) -> str:
        return type_str(self)


type TypeExpr = Atom | Fn

IND = Atom("Ind")
OMEGA = Atom("Ω")


def fn_type(*tys: TypeExpr) -> TypeExpr:
    """Right-nested function type; ``fn_type(a, b, c)`` is ``(a, (b, c))``."""

    if not tys:
        raise ValueError("fn_type needs at least one type")
    result = tys[-1]
    for ty in reversed(tys[:-1]):
        result = Fn(ty, result)
    return result


def is_fn_type(ty: TypeExpr) -> TypeIs[Fn]:
    return isinstance(ty, Fn)


def type_equal(a: TypeExpr, b: TypeExpr) -> bool:
    """Structural equality of two type expressions."""

    match a, b:
        case Atom(tag_a), Atom(tag_b):
            return tag_a == tag_b
        case Fn(dom_a, cod_a), Fn(dom_b, cod_b):
            return type_equal(dom_a, dom_b) and type_equal(cod_a, cod_b)
        case (Atom() | Fn()), (Atom() | Fn()):
            return False

    raise TypeError(f"Unexpected type expressions in type_equal: {a!r}, {b!r}")


def type_str(ty: TypeExpr) -> str:
    """Return a string unique to ``ty``, e.g. ``(Ind, (Ind, Ω))``."""

    match ty:
        case Atom(tag):
            return tag
        case Fn(dom, cod):
            return f"({type_str(dom)}, {type_str(cod)})"

    raise TypeError(f"Unexpected type expression: {ty!r}")


__all__ = [
    "Atom",
    "Fn",
    "TypeExpr",
    "IND",
    "OMEGA",
    "fn_type",
    "is_fn_type",
    "type_equal",
    "type_str",
]
