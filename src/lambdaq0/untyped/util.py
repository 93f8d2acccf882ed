from __future__ import annotations

from lambdaq0.errors import BoundVariableError
from lambdaq0.names import NameSupply
from lambdaq0.untyped.ast import Abs, App, Term, Var
from lambdaq0.untyped.subst import alpha_rename, substitute, supply_for


def var(name: str, free: bool = True) -> Var:
    """Return a new variable; equal to any other with the same name and flag."""

    return Var(name, free)


def _rename_binders(name: str, term: Term, names: NameSupply) -> Term:
    """Alpha-rename every binder of ``name`` inside ``term`` to a fresh name."""

    match term:
        case Var():
            return term
        case Abs(param, body):
            if param.name == name:
                term = alpha_rename(term, names.fresh(name))
                param, body = term.param, term.body
            return Abs(param, _rename_binders(name, body, names))
        case App(f, a):
            return App(_rename_binders(name, f, names), _rename_binders(name, a, names))

    raise TypeError(f"Unexpected term in abstract: {term!r}")


def abstract(x: Var, body: Term, names: NameSupply | None = None) -> Abs:
    """Bind the free variable ``x`` in ``body``.

    Inner binders that already use the name of ``x`` are renamed first, so
    the free occurrences converted to the bound form cannot be captured by
    them. A ``body`` without ``x`` gives a constant function.

    Raises:
        BoundVariableError: ``x`` is a bound variable.
    """

    if not x.free:
        raise BoundVariableError(x.name)
    names = names or supply_for(body, x)
    bound = x.bound()
    return Abs(bound, substitute(x, _rename_binders(x.name, body, names), bound, names))


def abstract_many(*params: Var, body: Term) -> Term:
    """Abstract ``params`` over ``body``, the first parameter outermost.

    ``abstract_many(f, g, body=t)`` is ``λf.[ λg.[ t ] ]``.
    """

    result: Term = body
    for param in reversed(params):
        result = abstract(param, result)
    return result


def apply(func: Term, *args: Term) -> Term:
    """Apply ``args`` to ``func`` left-associatively.

    ``apply(f, a, b)`` is ``App(App(f, a), b)``; applying more arguments to an
    existing chain extends that chain.
    """

    if not args:
        raise ValueError("apply needs at least one argument")
    result: Term = func
    for arg in args:
        result = App(result, arg)
    return result


def decompose_app(term: Term) -> tuple[Term, tuple[Term, ...]]:
    """Split an application chain into its head and argument tuple.

    This is the inverse of ``apply``. Non-applications return themselves as
    the head with an empty argument tuple.
    """

    args: list[Term] = []
    head = term
    while isinstance(head, App):
        args.insert(0, head.arg)
        head = head.func
    return head, tuple(args)


__all__ = ["var", "abstract", "abstract_many", "apply", "decompose_app"]
