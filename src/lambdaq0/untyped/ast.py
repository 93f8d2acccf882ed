"""Term nodes of the untyped lambda calculus.

Variables are named rather than de Bruijn indexed and carry a ``free`` flag:
the variable bound by an abstraction is stored in its bound form, and a free
variable and a bound variable of the same name are different variables.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Var:
    """Named variable.

    Args:
        name: Display name of the variable.
        free: ``False`` for the bound form introduced by an abstraction.
    """

    name: str
    free: bool = True

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Variable names must be non-empty")

    def bound(self) -> Var:
        return Var(self.name, free=False)

    def __str__(self) -> str:
        from lambdaq0.untyped.pretty import pretty

        return pretty(self)


@dataclass(frozen=True)
class Abs:
    """Lambda abstraction over a single bound parameter.

    Args:
        param: Bound variable standing for the argument.
        body: Term in which ``param`` may occur.
    """

    param: Var
    body: Term

    def __post_init__(self) -> None:
        if self.param.free:
            raise ValueError(
                f"Abstraction parameter must be bound, got free {self.param.name!r}"
            )

    def __str__(self) -> str:
        from lambdaq0.untyped.pretty import pretty

        return pretty(self)


@dataclass(frozen=True)
class App:
    """Application of ``func`` to ``arg``; chains associate to the left."""

    func: Term
    arg: Term

    def __str__(self) -> str:
        from lambdaq0.untyped.pretty import pretty

        return pretty(self)


type Term = Var | Abs | App


__all__ = ["Term", "Var", "Abs", "App"]
