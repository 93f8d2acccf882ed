"""Beta reduction helpers for untyped terms."""

from __future__ import annotations

from lambdaq0.names import NameSupply
from lambdaq0.untyped.ast import Abs, App, Term, Var
from lambdaq0.untyped.subst import substitute


def is_redex(term: Term) -> bool:
    return isinstance(term, App) and isinstance(term.func, Abs)


def is_normal(term: Term) -> bool:
    """Return ``True`` if no redex occurs anywhere in ``term``."""

    match term:
        case Var():
            return True
        case Abs(_, body):
            return is_normal(body)
        case App(f, a):
            return not is_redex(term) and is_normal(f) and is_normal(a)

    raise TypeError(f"Unexpected term in is_normal: {term!r}")


def contract_head(term: Term, names: NameSupply) -> Term | None:
    """Contract the redex at the head of ``term``; ``None`` if there is none.

    Only the function position of applications is searched.
    """

    match term:
        case App(Abs(param, body), arg):
            return substitute(param, body, arg, names)
        case App(f, a):
            f1 = contract_head(f, names)
            if f1 is not None:
                return App(f1, a)
            return None
        case _:
            return None


def contract(term: Term, names: NameSupply) -> Term | None:
    """Contract one redex anywhere in ``term``; ``None`` if it is normal.

    The head redex goes first. Otherwise applications search the function
    position before the operand and abstractions search their body.
    """

    t1 = contract_head(term, names)
    if t1 is not None:
        return t1

    match term:
        case App(f, a):
            f1 = contract(f, names)
            if f1 is not None:
                return App(f1, a)
            a1 = contract(a, names)
            if a1 is not None:
                return App(f, a1)
            return None

        case Abs(param, body):
            body1 = contract(body, names)
            if body1 is not None:
                return Abs(param, body1)
            return None

        case Var():
            return None

    raise TypeError(f"Unexpected term in beta_step: {term!r}")


def beta_head_step(term: Term, names: NameSupply | None = None) -> Term:
    reduced = contract_head(term, names or NameSupply())
    return term if reduced is None else reduced


def beta_step(term: Term, names: NameSupply | None = None) -> Term:
    """One beta-reduction step anywhere in the term.

    A term without redexes is returned unchanged.
    """

    reduced = contract(term, names or NameSupply())
    return term if reduced is None else reduced


__all__ = [
    "is_redex",
    "is_normal",
    "contract_head",
    "contract",
    "beta_head_step",
    "beta_step",
]
