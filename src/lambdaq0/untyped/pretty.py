"""Pretty-printing for untyped lambda terms."""

from __future__ import annotations

from lambdaq0.untyped.ast import Abs, App, Term, Var
from lambdaq0.untyped.util import decompose_app


def pretty(term: Term) -> str:
    """Return the deterministic display form of ``term``.

    Abstractions render as ``λx.[ body ]`` and applications as the head
    followed by each argument in parentheses, ``f (a) (b)``.
    """

    match term:
        case Var(name):
            return name
        case Abs(param, body):
            return f"λ{param.name}.[ {pretty(body)} ]"
        case App():
            head, args = decompose_app(term)
            return " ".join([pretty(head), *(f"({pretty(arg)})" for arg in args)])

    raise TypeError(f"Cannot pretty-print unknown term: {term!r}")


__all__ = ["pretty"]
