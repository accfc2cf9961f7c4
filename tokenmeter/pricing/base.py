"""Normalized pricing record and the pricing source interface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from ..config import MILLION


@dataclass(frozen=True)
class ModelPricing:
    """Resolved pricing for a model.

    All costs are in USD per 1 million tokens.
    """

    input_cost_per_m_token: float
    cached_input_cost_per_m_token: float
    output_cost_per_m_token: float


def to_per_million(value: float | None, fallback: float | None = None) -> float:
    """Convert a per-token cost to a per-million-token cost.

    Missing values fall back to ``fallback``, then to zero.
    """
    if value is None:
        value = fallback if fallback is not None else 0.0
    return value * MILLION


@runtime_checkable
class PricingSource(Protocol):
    """Anything that can resolve pricing for a model name."""

    async def get_pricing(self, model: str) -> ModelPricing: ...
