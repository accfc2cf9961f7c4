"""LiteLLM pricing catalog access.

Loads LiteLLM's community-maintained model cost database and answers two
kinds of queries against it:

- ``fetch_model_pricing()``: the whole catalog, for exact-key lookups.
- ``get_model_pricing(model)``: a relaxed single-model lookup that also tries
  provider prefixes and partial name matches.

The catalog is loaded once per fetcher and kept until ``close()``.

See: https://github.com/BerriAI/litellm/blob/main/model_prices_and_context_window.json
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping, Sequence
from importlib import resources
from typing import Any

import litellm

from ..config import CODEX_PROVIDER_PREFIXES, CatalogLoader
from ..exceptions import CatalogRetrievalError

logger = logging.getLogger(__name__)

# A single catalog record as LiteLLM stores it (costs are USD per token)
RawPricingEntry = dict[str, Any]

# Snapshot shipped inside the litellm distribution
_BUNDLED_CATALOG = "model_prices_and_context_window_backup.json"

# Documentation row at the top of LiteLLM's JSON
_SAMPLE_SPEC_KEY = "sample_spec"

_CODEX_MODEL_PREFIXES = ("gpt-", "o1", "o3", "o4", "codex")


def has_complete_token_pricing(entry: Mapping[str, Any] | None) -> bool:
    """Check that an entry carries both input and output token costs."""
    return (
        entry is not None
        and entry.get("input_cost_per_token") is not None
        and entry.get("output_cost_per_token") is not None
    )


def is_codex_model(key: str, provider_prefixes: Sequence[str] = CODEX_PROVIDER_PREFIXES) -> bool:
    """Check whether a catalog key names a model Codex can run."""
    name = key
    for prefix in provider_prefixes:
        if key.startswith(prefix):
            name = key[len(prefix) :]
            break
    return name.startswith(_CODEX_MODEL_PREFIXES)


async def load_litellm_catalog() -> dict[str, Any]:
    """Get LiteLLM's full model cost dictionary.

    Returns:
        Dictionary mapping model names to their pricing/capability info.
    """
    return dict(litellm.model_cost)


def _read_bundled_catalog() -> dict[str, Any]:
    text = resources.files("litellm").joinpath(_BUNDLED_CATALOG).read_text(encoding="utf-8")
    return json.loads(text)


async def load_bundled_catalog() -> dict[str, Any]:
    """Load the catalog snapshot bundled with litellm, limited to Codex models.

    Used when running offline or when the live catalog cannot be loaded.
    The file is read and parsed in a worker thread.
    """
    data = await asyncio.to_thread(_read_bundled_catalog)
    logger.debug("Read %d entries from bundled LiteLLM catalog", len(data))
    return {key: value for key, value in data.items() if is_codex_model(key)}


class LiteLLMPricingFetcher:
    """Fetches and memoizes LiteLLM model pricing.

    Usage:
        async with LiteLLMPricingFetcher(offline=True) as fetcher:
            catalog = await fetcher.fetch_model_pricing()
            entry = await fetcher.get_model_pricing("gpt-5")

    In online mode the live catalog is tried first and the offline loader is
    the fallback. In offline mode only the offline loader is used.
    """

    def __init__(
        self,
        offline: bool = False,
        offline_loader: CatalogLoader | None = None,
        online_loader: CatalogLoader | None = None,
        logger: logging.Logger | None = None,
        provider_prefixes: Sequence[str] = CODEX_PROVIDER_PREFIXES,
    ):
        self.offline = offline
        self.provider_prefixes = tuple(provider_prefixes)
        self.logger = logger or logging.getLogger(__name__)
        self._offline_loader = offline_loader or load_bundled_catalog
        self._online_loader = online_loader or load_litellm_catalog
        self._catalog: dict[str, RawPricingEntry] | None = None
        # Bumped by close() so loads started before it do not repopulate the cache
        self._generation = 0
        self._lock = asyncio.Lock()

    def candidate_keys(self, model: str) -> list[str]:
        """Catalog keys to try for a bare model name, in order."""
        return [model, *(f"{prefix}{model}" for prefix in self.provider_prefixes)]

    async def fetch_model_pricing(self) -> dict[str, RawPricingEntry]:
        """Return the full catalog, loading it on first use.

        Raises:
            CatalogRetrievalError: If no catalog source could be loaded.
        """
        if self._catalog is not None:
            return self._catalog

        async with self._lock:
            catalog = self._catalog
            if catalog is None:
                generation = self._generation
                catalog = await self._load()
                if generation == self._generation:
                    self._catalog = catalog
        return catalog

    async def get_model_pricing(self, model: str) -> RawPricingEntry | None:
        """Find the catalog entry for a model, allowing loose matches.

        Tries the exact name and each provider prefix first, then the first
        catalog key that contains the name or is contained in it, ignoring
        case.

        Args:
            model: Model name (e.g., 'gpt-5', 'gpt-5-codex').

        Returns:
            The matching entry, or None if nothing matches.

        Raises:
            CatalogRetrievalError: If no catalog source could be loaded.
        """
        catalog = await self.fetch_model_pricing()

        for candidate in self.candidate_keys(model):
            entry = catalog.get(candidate)
            if entry is not None:
                return entry

        lowered = model.lower()
        if not lowered:
            return None

        for key, entry in catalog.items():
            comparison = key.lower()
            if lowered in comparison or comparison in lowered:
                self.logger.debug("Matched pricing for %s using catalog key %s", model, key)
                return entry

        return None

    async def _load(self) -> dict[str, RawPricingEntry]:
        if not self.offline:
            self.logger.info("Fetching latest model pricing from LiteLLM")
            try:
                return await self._load_from(self._online_loader, "online")
            except CatalogRetrievalError as e:
                self.logger.warning("Falling back to offline model pricing: %s", e)

        try:
            return await self._load_from(self._offline_loader, "offline")
        except CatalogRetrievalError as e:
            self.logger.error("No model pricing available: %s", e)
            raise

    async def _load_from(self, loader: CatalogLoader, source: str) -> dict[str, RawPricingEntry]:
        try:
            raw = await loader()
        except Exception as e:
            raise CatalogRetrievalError(
                f"Failed to load {source} pricing catalog: {e}", source=source
            ) from e

        if not isinstance(raw, Mapping):
            raise CatalogRetrievalError(
                f"Invalid {source} pricing catalog: expected a mapping, got {type(raw).__name__}",
                source=source,
            )

        catalog = {
            str(key): dict(value)
            for key, value in raw.items()
            if key != _SAMPLE_SPEC_KEY and isinstance(value, Mapping)
        }
        self.logger.info("Loaded %s pricing for %d models", source, len(catalog))
        return catalog

    def close(self) -> None:
        """Release the memoized catalog, including one still being loaded."""
        self._generation += 1
        self._catalog = None

    def __enter__(self) -> LiteLLMPricingFetcher:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit."""
        self.close()

    async def __aenter__(self) -> LiteLLMPricingFetcher:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
