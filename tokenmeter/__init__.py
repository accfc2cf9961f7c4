"""tokenmeter: token pricing and cost estimation for Codex usage.

Usage:
    from tokenmeter import CodexPricingSource, PricingConfig

    async with CodexPricingSource(PricingConfig(offline=True)) as source:
        pricing = await source.get_pricing("gpt-5-codex")
"""

from .config import (
    CODEX_MODEL_ALIASES,
    CODEX_PROVIDER_PREFIXES,
    MILLION,
    PricingConfig,
)
from .exceptions import CatalogRetrievalError, PricingNotFoundError, TokenmeterError
from .pricing import (
    CodexPricingSource,
    CostEstimate,
    LiteLLMPricingFetcher,
    ModelPricing,
    PricingSource,
    TokenUsage,
    calculate_cost_usd,
    estimate_cost,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "CODEX_MODEL_ALIASES",
    "CODEX_PROVIDER_PREFIXES",
    "MILLION",
    "PricingConfig",
    # Errors
    "CatalogRetrievalError",
    "PricingNotFoundError",
    "TokenmeterError",
    # Pricing
    "CodexPricingSource",
    "CostEstimate",
    "LiteLLMPricingFetcher",
    "ModelPricing",
    "PricingSource",
    "TokenUsage",
    "calculate_cost_usd",
    "estimate_cost",
]
