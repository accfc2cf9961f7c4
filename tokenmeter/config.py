"""Configuration for Codex pricing resolution."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

# Raw LiteLLM catalog: model key -> pricing/capability record
CatalogLoader = Callable[[], Awaitable[Mapping[str, Any]]]

MILLION = 1_000_000

# Tried in order after the bare model name
CODEX_PROVIDER_PREFIXES: tuple[str, ...] = ("openai/", "azure/", "openrouter/openai/")

# Bare model name -> bare model name priced the same
CODEX_MODEL_ALIASES: dict[str, str] = {
    "gpt-5-codex": "gpt-5",
    "gpt-5.3-codex": "gpt-5.2-codex",
}


@dataclass
class PricingConfig:
    """Configuration for the Codex pricing source."""

    # Skip the online catalog and only use the offline loader
    offline: bool = False

    # Async callables returning the raw catalog; None selects the LiteLLM defaults
    offline_loader: CatalogLoader | None = None
    online_loader: CatalogLoader | None = None

    provider_prefixes: tuple[str, ...] = CODEX_PROVIDER_PREFIXES
    model_aliases: Mapping[str, str] = field(default_factory=lambda: dict(CODEX_MODEL_ALIASES))

    logger: logging.Logger | None = None
