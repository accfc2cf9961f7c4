"""Pricing resolution for Codex models.

LiteLLM's catalog is not always consistent for new Codex models: an entry
may be missing, filed under a provider prefix, or present with token limits
but no costs. ``CodexPricingSource`` works around this in a fixed order:

1. Exact lookup of the model, bare and with each provider prefix.
2. The model's alias (if any), exact lookup then relaxed lookup.
3. Relaxed lookup of the original model name.

Only an entry with both input and output costs is accepted.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..config import PricingConfig
from ..exceptions import PricingNotFoundError
from .base import ModelPricing, to_per_million
from .litellm_pricing import LiteLLMPricingFetcher, RawPricingEntry, has_complete_token_pricing


class CodexPricingSource:
    """Resolves normalized pricing for bare Codex model names.

    Usage:
        with CodexPricingSource(PricingConfig(offline=True)) as source:
            pricing = await source.get_pricing("gpt-5-codex")
            print(pricing.input_cost_per_m_token)
    """

    def __init__(
        self,
        config: PricingConfig | None = None,
        fetcher: LiteLLMPricingFetcher | None = None,
    ):
        self.config = config or PricingConfig()
        self.model_aliases: Mapping[str, str] = self.config.model_aliases
        self._fetcher = fetcher or LiteLLMPricingFetcher(
            offline=self.config.offline,
            offline_loader=self.config.offline_loader,
            online_loader=self.config.online_loader,
            logger=self.config.logger,
            provider_prefixes=self.config.provider_prefixes,
        )
        self.provider_prefixes = self._fetcher.provider_prefixes

    async def _get_strict_pricing(self, model: str) -> RawPricingEntry | None:
        pricing_map = await self._fetcher.fetch_model_pricing()
        for candidate in self._fetcher.candidate_keys(model):
            pricing = pricing_map.get(candidate)
            if pricing is not None:
                return pricing
        return None

    async def _get_relaxed_pricing(self, model: str) -> RawPricingEntry | None:
        return await self._fetcher.get_model_pricing(model)

    async def get_pricing(self, model: str) -> ModelPricing:
        """Resolve per-million-token pricing for a model.

        Args:
            model: Bare model name (e.g., 'gpt-5-codex').

        Returns:
            ModelPricing with all three costs populated.

        Raises:
            PricingNotFoundError: If no complete entry was found.
            CatalogRetrievalError: If the catalog could not be loaded.
        """
        pricing = await self._get_strict_pricing(model)

        if not has_complete_token_pricing(pricing):
            alias = self.model_aliases.get(model)
            if alias is not None:
                alias_pricing = await self._get_strict_pricing(alias)
                if not has_complete_token_pricing(alias_pricing):
                    alias_pricing = await self._get_relaxed_pricing(alias)
                if has_complete_token_pricing(alias_pricing):
                    pricing = alias_pricing

        if not has_complete_token_pricing(pricing):
            relaxed_pricing = await self._get_relaxed_pricing(model)
            if has_complete_token_pricing(relaxed_pricing):
                pricing = relaxed_pricing

        if pricing is None or not has_complete_token_pricing(pricing):
            raise PricingNotFoundError(model)

        input_cost = pricing["input_cost_per_token"]
        return ModelPricing(
            input_cost_per_m_token=to_per_million(input_cost),
            cached_input_cost_per_m_token=to_per_million(
                pricing.get("cache_read_input_token_cost"), input_cost
            ),
            output_cost_per_m_token=to_per_million(pricing["output_cost_per_token"]),
        )

    # Alias kept for callers that think of this as a resolver
    resolve = get_pricing

    def close(self) -> None:
        """Release the underlying pricing fetcher."""
        self._fetcher.close()

    def __enter__(self) -> CodexPricingSource:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit."""
        self.close()

    async def __aenter__(self) -> CodexPricingSource:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
