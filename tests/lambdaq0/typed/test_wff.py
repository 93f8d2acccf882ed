import pytest

from lambdaq0.errors import TypeMismatchError
from lambdaq0.typed.types import IND, OMEGA, Fn, fn_type
from lambdaq0.typed.wff import (
    Abstraction,
    Application,
    Constant,
    Variable,
    VariableSupply,
    abstract,
    apply,
)

f = Constant("f", Fn(IND, IND))
x = Variable("x", IND)
p = Variable("p", OMEGA)


def test_application_takes_codomain_type() -> None:
    fx = apply(f, x)
    assert fx.ty == IND
    assert fx.name == "[f(x)]"
    assert str(fx) == "[f(x)]"


def test_application_rejects_mismatched_operand() -> None:
    with pytest.raises(TypeMismatchError, match=r"\(Ind, Ind\)") as excinfo:
        apply(f, p)
    assert excinfo.value.operator_type == Fn(IND, IND)
    assert excinfo.value.operand_type == OMEGA
    assert "Ω" in str(excinfo.value)
    assert isinstance(excinfo.value, TypeError)


def test_application_rejects_non_function_operator() -> None:
    with pytest.raises(TypeMismatchError):
        apply(x, x)


def test_direct_construction_is_checked_too() -> None:
    with pytest.raises(TypeMismatchError):
        Application(f, p)


def test_abstraction_type_comes_from_components() -> None:
    lam = abstract(x, apply(f, x))
    assert lam.ty == Fn(IND, IND)
    assert lam.name == "[λx.[f(x)]]"
    assert apply(lam, x).ty == IND


def test_abstraction_must_bind_a_variable() -> None:
    with pytest.raises(TypeError, match="must bind a variable"):
        Abstraction(Constant("c", IND), x)  # type: ignore[arg-type]


def test_apply_chains_operands() -> None:
    g = Constant("g", fn_type(IND, OMEGA, IND))
    assert apply(g, x, p).ty == IND
    assert apply(g, x, p) == apply(apply(g, x), p)
    with pytest.raises(ValueError, match="at least one operand"):
        apply(g)


def test_variable_supply_hands_out_distinct_names() -> None:
    supply = VariableSupply()
    a = supply(IND)
    b = supply(IND)
    assert (a.name, b.name) == ("x_1", "x_2")
    assert a != b
    assert b.ty == IND
