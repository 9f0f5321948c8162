from __future__ import annotations

import json
import logging
import os
import re
import time
from functools import lru_cache
from typing import Any

from openai import OpenAI

from resume_ats.scoring.types import ScorerError

from .config import ai_scoring_available, load_ai_config

logger = logging.getLogger(__name__)

_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


@lru_cache(maxsize=1)
def _client() -> OpenAI:
    cfg = load_ai_config()
    return OpenAI(
        api_key=(os.getenv("OPENAI_API_KEY") or "").strip(),
        base_url=(os.getenv("OPENAI_BASE_URL") or None),
        timeout=cfg.timeout_s,
        max_retries=int(os.getenv("OPENAI_MAX_RETRIES", "1")),
    )


def parse_json_object(content: str) -> dict[str, Any] | None:
    """Parse the first ``{...}`` block of a model answer, tolerating prose or fences around it."""
    if not content:
        return None
    match = _JSON_OBJECT_RE.search(content)
    if not match:
        return None
    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError:
        return None
    return parsed if isinstance(parsed, dict) else None


def json_completion(
    *,
    system_prompt: str,
    user_prompt: str,
    temperature: float = 0.2,
    max_output_tokens: int = 700,
) -> dict[str, Any] | None:
    if not ai_scoring_available():
        logger.debug("llm_json_skipped reason=llm_disabled")
        return None

    cfg = load_ai_config()
    started = time.perf_counter()
    try:
        response = _client().chat.completions.create(
            model=cfg.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=temperature,
            response_format={"type": "json_object"},
            max_tokens=max_output_tokens,
        )
        content = response.choices[0].message.content if response.choices else ""
    except Exception as exc:  # noqa: BLE001 - deterministic fallback is expected
        logger.warning("llm_json_failed model=%s prompt_len=%s: %s", cfg.model, len(user_prompt), exc)
        return None

    latency_ms = int((time.perf_counter() - started) * 1000)
    parsed = parse_json_object(content or "")
    if parsed is None:
        logger.warning("llm_json_invalid model=%s latency_ms=%s", cfg.model, latency_ms)
        return None
    logger.info("llm_json_completed model=%s latency_ms=%s", cfg.model, latency_ms)
    return parsed


def json_completion_required(
    *,
    system_prompt: str,
    user_prompt: str,
    temperature: float = 0.2,
    max_output_tokens: int = 700,
) -> dict[str, Any]:
    if not ai_scoring_available():
        raise ScorerError("AI scoring is enabled but OpenAI is not configured.", code="scorer_unavailable")

    payload = json_completion(
        system_prompt=system_prompt,
        user_prompt=user_prompt,
        temperature=temperature,
        max_output_tokens=max_output_tokens,
    )
    if not payload:
        raise ScorerError("AI scorer did not return a usable JSON object.", code="scorer_invalid")
    return payload
