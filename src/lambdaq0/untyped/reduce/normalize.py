"""Iterated beta reduction with a step budget."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from lambdaq0.errors import NonTerminationError
from lambdaq0.names import NameSupply
from lambdaq0.untyped.alpha import alpha_equal
from lambdaq0.untyped.ast import Term
from lambdaq0.untyped.reduce.beta import contract
from lambdaq0.untyped.subst import supply_for

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 1000


def reductions(
    term: Term, max_steps: int = DEFAULT_MAX_STEPS, names: NameSupply | None = None
) -> Iterator[Term]:
    """Yield every term of the reduction sequence starting at ``term``.

    The starting term itself is not yielded; the last term yielded is the
    normal form.

    Raises:
        NonTerminationError: more than ``max_steps`` contractions would be
            needed, or a contraction reproduced its input up to renaming.
    """

    if max_steps < 0:
        raise ValueError("max_steps must be non-negative")
    names = names or supply_for(term)
    steps = 0
    while True:
        looped = False
        try:
            reduced = contract(term, names)
            if reduced is not None and steps < max_steps:
                looped = alpha_equal(reduced, term)
        except RecursionError as exc:
            # The term outgrew the interpreter stack before the budget ran out.
            raise NonTerminationError(term, steps, max_steps) from exc
        if reduced is None:
            return
        if steps == max_steps:
            raise NonTerminationError(term, steps, max_steps)
        steps += 1
        logger.debug("beta step %d: %s", steps, reduced)
        if looped:
            raise NonTerminationError(reduced, steps, max_steps)
        yield reduced
        term = reduced


def beta_normalize(
    term: Term, max_steps: int = DEFAULT_MAX_STEPS, names: NameSupply | None = None
) -> Term:
    """Reduce ``term`` until no redex remains."""

    result = term
    for result in reductions(term, max_steps, names):
        pass
    return result


__all__ = ["DEFAULT_MAX_STEPS", "reductions", "beta_normalize"]
