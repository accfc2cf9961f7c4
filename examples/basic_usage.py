#!/usr/bin/env python3
"""
Basic usage example for tokenmeter.

Resolves pricing for a few Codex models from LiteLLM's bundled catalog
snapshot and estimates the cost of a session.

Run:
    python examples/basic_usage.py
"""

import asyncio
import logging

from tokenmeter import (
    CodexPricingSource,
    PricingConfig,
    PricingNotFoundError,
    TokenUsage,
    estimate_cost,
)

# Enable logging to see where pricing is loaded from
logging.basicConfig(
    level=logging.INFO,
    format="%(name)s: %(message)s",
)

MODELS = ["gpt-5", "gpt-5-codex", "gpt-5.3-codex", "gpt-4.1"]


async def main() -> None:
    usage = TokenUsage(
        input_tokens=120_000,
        cached_input_tokens=80_000,
        output_tokens=6_000,
        reasoning_output_tokens=2_500,
    )

    async with CodexPricingSource(PricingConfig(offline=True)) as source:
        print("=" * 60)
        print(f"{'model':<16}{'input/1M':>12}{'cached/1M':>12}{'output/1M':>12}")
        print("=" * 60)
        for model in MODELS:
            try:
                pricing = await source.get_pricing(model)
            except PricingNotFoundError as e:
                print(f"{model:<16}{str(e):>36}")
                continue
            print(
                f"{model:<16}"
                f"{pricing.input_cost_per_m_token:>12.3f}"
                f"{pricing.cached_input_cost_per_m_token:>12.3f}"
                f"{pricing.output_cost_per_m_token:>12.3f}"
            )

        estimate = await estimate_cost(source, "gpt-5-codex", usage)
        print(f"\nSession on {estimate.model}: ${estimate.cost_usd:.4f}")


if __name__ == "__main__":
    asyncio.run(main())
