"""Exceptions raised by tokenmeter."""

from __future__ import annotations


class TokenmeterError(Exception):
    """Base class for all tokenmeter errors."""


class CatalogRetrievalError(TokenmeterError):
    """The pricing catalog could not be loaded.

    Raised by the catalog fetcher for both the batch and the single-model
    lookup. Resolvers let it propagate unchanged.
    """

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source


class PricingNotFoundError(TokenmeterError, LookupError):
    """No complete pricing entry exists for a model."""

    def __init__(self, model: str):
        super().__init__(f"Pricing not found for model {model}")
        self.model = model
