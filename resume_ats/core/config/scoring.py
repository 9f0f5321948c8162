from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

_SCORING_CONFIG_CACHE: dict[str, Any] | None = None
_SCORING_CONFIG_PATH = Path(__file__).resolve().parent / "scoring.yaml"

ATS_COMPONENTS = ("skills", "experience", "education", "keywords")


def _check_ats_policy(config: dict[str, Any]) -> None:
    ats = config.get("ats")
    if not isinstance(ats, dict):
        raise RuntimeError(f"Scoring config '{_SCORING_CONFIG_PATH}' has no 'ats' section.")

    weights = ats.get("weights")
    if not isinstance(weights, dict) or any(component not in weights for component in ATS_COMPONENTS):
        raise RuntimeError(
            f"Scoring config '{_SCORING_CONFIG_PATH}': ats.weights must define "
            f"{', '.join(ATS_COMPONENTS)}."
        )
    if abs(sum(float(weights[component]) for component in ATS_COMPONENTS) - 1.0) > 1e-6:
        raise RuntimeError(f"Scoring config '{_SCORING_CONFIG_PATH}': ats.weights must sum to 1.0.")

    keyword_weights = ats.get("keyword_weights")
    if not isinstance(keyword_weights, dict) or not all(
        isinstance(weight, int) and not isinstance(weight, bool) for weight in keyword_weights.values()
    ):
        raise RuntimeError(
            f"Scoring config '{_SCORING_CONFIG_PATH}': ats.keyword_weights must map keywords to integers."
        )


def get_scoring_config() -> dict[str, Any]:
    """Load the ATS scoring policy (component weights, keyword table) and cache it."""
    global _SCORING_CONFIG_CACHE

    if _SCORING_CONFIG_CACHE is not None:
        return _SCORING_CONFIG_CACHE

    try:
        raw = _SCORING_CONFIG_PATH.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to read scoring config '{_SCORING_CONFIG_PATH}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in scoring config '{_SCORING_CONFIG_PATH}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid scoring config '{_SCORING_CONFIG_PATH}': expected a top-level mapping.")
    _check_ats_policy(parsed)

    _SCORING_CONFIG_CACHE = parsed
    return _SCORING_CONFIG_CACHE


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Look up a dotted path such as ``ats.weights.skills``."""
    if not path:
        return default

    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current
