"""Reduction utilities split into single steps and normalization."""

from .beta import beta_head_step, beta_step, contract, is_normal, is_redex
from .normalize import DEFAULT_MAX_STEPS, beta_normalize, reductions

__all__ = [
    "DEFAULT_MAX_STEPS",
    "beta_head_step",
    "beta_normalize",
    "beta_step",
    "contract",
    "is_normal",
    "is_redex",
    "reductions",
]
