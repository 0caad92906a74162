"""Engine configuration for focusdeck.

Defaults come from `focusdeck.models.constants` and can be overridden through
environment variables (a `.env` file is honored).
"""

import os
from enum import Enum
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from focusdeck.models.constants import DEFAULT_CONFIDENCE, DEFAULT_IMPACT, DEFAULT_REACH

load_dotenv()


class LabelMatchMode(str, Enum):
    """How quick-add label keywords are detected in the title."""
    SUBSTRING = "substring"  # "opscenter" matches "ops"
    WORD = "word"            # only whole words match


class EngineConfig(BaseModel):
    """Tunable policy for RICE defaults and quick-add label matching."""

    default_reach: float = Field(DEFAULT_REACH, description="Reach used when a task has none")
    default_impact: float = Field(DEFAULT_IMPACT, description="Impact used when a task has none")
    default_confidence: float = Field(DEFAULT_CONFIDENCE, description="Confidence used when a task has none")
    label_match: LabelMatchMode = Field(LabelMatchMode.SUBSTRING, description="Label keyword matching mode")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


def get_engine_config() -> EngineConfig:
    """Build the engine configuration from the environment."""
    return EngineConfig(
        default_reach=_env_float("FOCUSDECK_DEFAULT_REACH", DEFAULT_REACH),
        default_impact=_env_float("FOCUSDECK_DEFAULT_IMPACT", DEFAULT_IMPACT),
        default_confidence=_env_float("FOCUSDECK_DEFAULT_CONFIDENCE", DEFAULT_CONFIDENCE),
        label_match=LabelMatchMode(os.getenv("FOCUSDECK_LABEL_MATCH", LabelMatchMode.SUBSTRING.value).strip().lower()),
    )


# Read once at import so a malformed environment fails at startup.
ENGINE_CONFIG = get_engine_config()


def resolve_config(config: Optional[EngineConfig]) -> EngineConfig:
    """Return `config`, or the default read from the environment at import."""
    return config if config is not None else ENGINE_CONFIG
