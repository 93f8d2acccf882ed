"""Capture-avoiding substitution and alpha-conversion on named terms."""

from __future__ import annotations

import logging

from lambdaq0.names import NameSupply
from lambdaq0.untyped.ast import Abs, App, Term, Var

logger = logging.getLogger(__name__)


def variables(term: Term) -> frozenset[str]:
    """Names of every variable occurring in ``term``, free or bound."""

    match term:
        case Var(name):
            return frozenset((name,))
        case Abs(param, body):
            return variables(body) | {param.name}
        case App(f, a):
            return variables(f) | variables(a)

    raise TypeError(f"Unexpected term in variables: {term!r}")


def free_variables(term: Term) -> frozenset[Var]:
    match term:
        case Var(free=True):
            return frozenset((term,))
        case Var():
            return frozenset()
        case Abs(param, body):
            return frozenset(v for v in free_variables(body) if v.name != param.name)
        case App(f, a):
            return free_variables(f) | free_variables(a)

    raise TypeError(f"Unexpected term in free_variables: {term!r}")


def occurs(x: Var, term: Term) -> bool:
    """Return ``True`` if ``x`` occurs in ``term`` outside a shadowing binder."""

    match term:
        case Var():
            return term == x
        case Abs(param, body):
            return param.name != x.name and occurs(x, body)
        case App(f, a):
            return occurs(x, f) or occurs(x, a)

    raise TypeError(f"Unexpected term in occurs: {term!r}")


def occurs_free(x: Var, term: Term) -> bool:
    return x.free and occurs(x, term)


def supply_for(*terms: Term) -> NameSupply:
    """A name supply that avoids every name occurring in ``terms``."""

    taken: set[str] = set()
    for term in terms:
        taken |= variables(term)
    return NameSupply(taken)


def _base_name(name: str) -> str:
    return name.rstrip("0123456789") or name


def alpha_rename(term: Abs, new_name: str) -> Abs:
    """Rename the parameter of ``term`` to ``new_name`` throughout its body.

    The caller is responsible for ``new_name`` not occurring in the body.
    """

    new_param = Var(new_name, free=False)
    return Abs(new_param, substitute(term.param, term.body, new_param))


def substitute(
    x: Var, expr: Term, replacement: Term, names: NameSupply | None = None
) -> Term:
    """Replace occurrences of ``x`` in ``expr`` by ``replacement``.

    Variables match by name and binding flag. An abstraction whose parameter
    has the name of ``x`` shadows it. An abstraction whose parameter name
    occurs in ``replacement`` is renamed to a fresh name before descending,
    so no variable of ``replacement`` is captured.
    """

    if not occurs(x, expr):
        return expr
    danger = variables(replacement)
    names = names or NameSupply()
    names.reserve(x.name, *variables(expr), *danger)
    return _substitute(x, expr, replacement, danger, names)


def _substitute(
    x: Var, expr: Term, replacement: Term, danger: frozenset[str], names: NameSupply
) -> Term:
    match expr:
        case Var():
            return replacement if expr == x else expr
        case Abs(param, body):
            if param.name == x.name or not occurs(x, body):
                return expr
            if param.name in danger:
                names.reserve(*variables(body))
                renamed = alpha_rename(expr, names.fresh(_base_name(param.name)))
                logger.debug("renamed %s to %s to avoid capture", expr, renamed)
                param, body = renamed.param, renamed.body
            return Abs(param, _substitute(x, body, replacement, danger, names))
        case App(f, a):
            return App(
                _substitute(x, f, replacement, danger, names),
                _substitute(x, a, replacement, danger, names),
            )

    raise TypeError(f"Unexpected term in substitute: {expr!r}")


__all__ = [
    "variables",
    "free_variables",
    "occurs",
    "occurs_free",
    "supply_for",
    "alpha_rename",
    "substitute",
]
