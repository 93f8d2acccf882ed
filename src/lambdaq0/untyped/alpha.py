"""Alpha-equivalence by canonical renaming of bound variables."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from itertools import count

from lambdaq0.untyped.ast import Abs, App, Term, Var


def _canonical(term: Term, env: Mapping[str, str], tokens: Iterator[int]) -> Term:
    match term:
        case Var(name, free=False) if name in env:
            return Var(env[name], free=False)
        case Var():
            return term
        case Abs(param, body):
            token = f"#{next(tokens)}"
            return Abs(
                Var(token, free=False),
                _canonical(body, {**env, param.name: token}, tokens),
            )
        case App(f, a):
            return App(_canonical(f, env, tokens), _canonical(a, env, tokens))

    raise TypeError(f"Unexpected term in canonicalize: {term!r}")


def canonicalize(term: Term) -> Term:
    """Rename bound variables to ``#0``, ``#1``, ... in binder-entry order.

    Free variables, and bound variables with no enclosing binder, keep their
    names.
    """

    return _canonical(term, {}, count())


def alpha_equal(a: Term, b: Term) -> bool:
    """Return ``True`` when ``a`` and ``b`` differ only in bound-variable names."""

    return a == b or canonicalize(a) == canonicalize(b)


__all__ = ["canonicalize", "alpha_equal"]
