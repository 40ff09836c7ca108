"""Thin wrapper around the Anthropic SDK for short text clean-up requests."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from shared.config_store import get_setting

logger = logging.getLogger(__name__)

_ENV_PATH = Path(__file__).resolve().parent.parent / ".env"


def get_api_key() -> str:
    """Read ANTHROPIC_API_KEY from the shared .env file, then the environment."""
    from dotenv import dotenv_values

    env = dotenv_values(_ENV_PATH)
    return env.get("ANTHROPIC_API_KEY") or os.environ.get("ANTHROPIC_API_KEY", "")


def has_api_key() -> bool:
    return bool(get_api_key())


def normalize_text(
    instruction: str,
    text: str,
    max_tokens: int = 100,
    timeout: float | None = None,
) -> str:
    """Send a one-shot clean-up request to Claude and return the reply text.

    Raises RuntimeError if the API key is missing. SDK errors (network,
    non-2xx, timeouts) propagate to the caller. Raises ValueError when the
    response carries no text block.
    """
    import anthropic

    api_key = get_api_key()
    if not api_key:
        raise RuntimeError(
            "ANTHROPIC_API_KEY not found in .env. "
            "Add it to enable AI-assisted name and address formatting."
        )

    model = get_setting("normalizer_model")
    if timeout is None:
        timeout = float(get_setting("normalizer_timeout_seconds"))

    client = anthropic.Anthropic(api_key=api_key, timeout=timeout, max_retries=0)
    message = client.messages.create(
        model=model,
        max_tokens=max_tokens,
        temperature=0.1,
        system=instruction,
        messages=[{"role": "user", "content": f'Input: "{text}"'}],
    )

    logger.debug(
        "normalize_text model=%s input_tokens=%s output_tokens=%s",
        model,
        message.usage.input_tokens,
        message.usage.output_tokens,
    )

    for block in message.content:
        if getattr(block, "type", "") == "text":
            return block.text
    raise ValueError("Claude response contained no text block")
