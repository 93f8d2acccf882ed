from lambdaq0.untyped.ast import App
from lambdaq0.untyped.pretty import pretty
from lambdaq0.untyped.util import abstract, abstract_many, apply, var


def test_identity_rendering() -> None:
    x = var("x")
    assert pretty(abstract(x, x)) == "λx.[ x ]"


def test_application_chain_rendering() -> None:
    f, a, b = var("f"), var("a"), var("b")
    assert pretty(apply(f, a, b)) == "f (a) (b)"
    assert pretty(App(f, App(var("g"), a))) == "f (g (a))"


def test_redex_rendering() -> None:
    x = var("x")
    assert pretty(App(abstract(x, x), var("y"))) == "λx.[ x ] (y)"


def test_composition_rendering() -> None:
    f, g, arg = var("f"), var("g"), var("arg")
    compose = abstract_many(f, g, body=App(f, App(g, arg)))
    assert pretty(compose) == "λf.[ λg.[ f (g (arg)) ] ]"
    assert str(compose) == pretty(compose)
