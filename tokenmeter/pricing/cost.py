"""Token usage cost calculation."""

from __future__ import annotations

from dataclasses import dataclass

from ..config import MILLION
from .base import ModelPricing, PricingSource


@dataclass
class TokenUsage:
    """Token counts for one or more model calls.

    ``cached_input_tokens`` is a subset of ``input_tokens`` and
    ``reasoning_output_tokens`` is a subset of ``output_tokens``.
    """

    input_tokens: int = 0
    cached_input_tokens: int = 0
    output_tokens: int = 0
    reasoning_output_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


@dataclass
class CostEstimate:
    """Cost of a token usage under a model's pricing."""

    model: str
    usage: TokenUsage
    pricing: ModelPricing
    cost_usd: float


def calculate_cost_usd(usage: TokenUsage, pricing: ModelPricing) -> float:
    """Calculate cost in USD for a token usage.

    Cached input tokens are charged at the cached rate and the rest of the
    input at the regular input rate. Reasoning tokens are already counted in
    the output tokens.

    Args:
        usage: Token counts.
        pricing: Resolved per-million-token pricing.

    Returns:
        Cost in USD.
    """
    cached_input = min(max(usage.cached_input_tokens, 0), max(usage.input_tokens, 0))
    non_cached_input = max(usage.input_tokens - cached_input, 0)
    output = max(usage.output_tokens, 0)

    input_cost = (non_cached_input / MILLION) * pricing.input_cost_per_m_token
    cached_cost = (cached_input / MILLION) * pricing.cached_input_cost_per_m_token
    output_cost = (output / MILLION) * pricing.output_cost_per_m_token
    return input_cost + cached_cost + output_cost


async def estimate_cost(source: PricingSource, model: str, usage: TokenUsage) -> CostEstimate:
    """Resolve pricing for a model and estimate the cost of a usage.

    Raises:
        PricingNotFoundError: If the source has no pricing for the model.
    """
    pricing = await source.get_pricing(model)
    return CostEstimate(
        model=model,
        usage=usage,
        pricing=pricing,
        cost_usd=calculate_cost_usd(usage, pricing),
    )
