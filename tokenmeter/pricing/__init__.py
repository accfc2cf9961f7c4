"""Pricing module for Codex usage cost estimation.

Resolves per-million-token pricing for Codex models from LiteLLM's
community-maintained pricing database, with provider-prefix lookups and
model aliases for entries the database is missing or only partly fills in.
"""

from .base import ModelPricing, PricingSource, to_per_million
from .codex import CodexPricingSource
from .cost import CostEstimate, TokenUsage, calculate_cost_usd, estimate_cost
from .litellm_pricing import (
    LiteLLMPricingFetcher,
    RawPricingEntry,
    has_complete_token_pricing,
    is_codex_model,
    load_bundled_catalog,
    load_litellm_catalog,
)

__all__ = [
    # Resolution
    "CodexPricingSource",
    "ModelPricing",
    "PricingSource",
    "to_per_million",
    # Catalog access
    "LiteLLMPricingFetcher",
    "RawPricingEntry",
    "has_complete_token_pricing",
    "is_codex_model",
    "load_bundled_catalog",
    "load_litellm_catalog",
    # Cost calculation
    "CostEstimate",
    "TokenUsage",
    "calculate_cost_usd",
    "estimate_cost",
]
