from lambdaq0.untyped.ast import Abs, App, Var
from lambdaq0.untyped.subst import (
    alpha_rename,
    free_variables,
    occurs_free,
    substitute,
    variables,
)
from lambdaq0.untyped.util import abstract, var

x, y, z, w = var("x"), var("y"), var("z"), var("w")


def test_substitute_replaces_matching_variable() -> None:
    assert substitute(x, x, y) == y
    assert substitute(x, z, y) == z


def test_substitute_rebuilds_applications() -> None:
    assert substitute(x, App(x, App(z, x)), y) == App(y, App(z, y))


def test_substitute_is_noop_without_occurrence() -> None:
    expr = abstract(y, App(y, z))
    assert substitute(x, expr, w) == expr


def test_substitute_respects_binding_flag() -> None:
    expr = App(Var("x", False), x)
    assert substitute(x, expr, w) == App(Var("x", False), w)
    assert substitute(Var("x", False), expr, w) == App(w, x)


def test_shadowing_binder_blocks_substitution() -> None:
    xb = Var("x", False)
    inner = Abs(xb, xb)
    assert substitute(xb, App(xb, inner), y) == App(y, inner)


def test_substitute_avoids_capture() -> None:
    expr = abstract(y, App(x, y))
    result = substitute(x, expr, y)
    assert result != abstract(y, App(y, y))
    assert result == Abs(Var("y1", False), App(y, Var("y1", False)))
    assert y in free_variables(result)
    assert str(result) == "λy1.[ y (y1) ]"


def test_capture_avoidance_covers_bound_replacements() -> None:
    yb = Var("y", False)
    xb = Var("x", False)
    result = substitute(xb, Abs(yb, xb), yb)
    assert result == Abs(Var("y1", False), yb)


def test_free_variables_and_occurrence() -> None:
    term = abstract(x, App(x, y))
    assert free_variables(term) == {y}
    assert variables(term) == {"x", "y"}
    assert not occurs_free(x, term)
    assert occurs_free(x, App(x, y))


def test_alpha_rename_changes_parameter_and_occurrences() -> None:
    renamed = alpha_rename(abstract(x, App(x, y)), "z")
    assert renamed == abstract(z, App(z, y))


def test_binder_of_same_name_shadows_free_variable() -> None:
    xb = Var("x", False)
    expr = Abs(xb, App(xb, x))
    assert substitute(x, expr, y) == expr
    assert free_variables(expr) == frozenset()
    assert not occurs_free(x, expr)
