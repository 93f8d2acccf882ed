from lambdaq0.typed.axioms import axiom_1, axiom_2, axiom_3, axiom_5
from lambdaq0.typed.logic import Logic
from lambdaq0.typed.types import IND, OMEGA, Fn


def test_axioms_are_propositions() -> None:
    logic = Logic()
    assert axiom_1(logic).ty == OMEGA
    assert axiom_2(logic, IND).ty == OMEGA
    assert axiom_2(logic, Fn(IND, OMEGA)).ty == OMEGA
    assert axiom_3(logic, IND, OMEGA).ty == OMEGA
    assert axiom_5(logic).ty == OMEGA


def test_description_axiom_mentions_iota() -> None:
    assert "Iota" in axiom_5(Logic()).name


def test_axiom_schemata_vary_with_type() -> None:
    logic = Logic()
    assert axiom_2(logic, IND) != axiom_2(logic, OMEGA)
