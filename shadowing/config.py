"""Normalization options and service settings for practice comparison."""
from __future__ import annotations

import os
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from .errors import ConfigurationError

# External speech-recognition service (black box returning text)
ASR_SERVICE_URL = os.getenv("SHADOWING_ASR_SERVICE_URL", "http://localhost:8000/asr")
ASR_TIMEOUT = float(os.getenv("SHADOWING_ASR_TIMEOUT", "60"))
ASR_RETRIES = int(os.getenv("SHADOWING_ASR_RETRIES", "1"))


class NormalizationOptions(BaseModel):
    """Word normalization rules applied before comparison.

    Every option is independently toggleable. Field names are snake_case;
    camelCase keys (``caseSensitive`` ...) are accepted when loading payloads.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        strict=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    case_sensitive: bool = False
    ignore_punctuation: bool = True
    trim_whitespace: bool = True
    expand_contractions: bool = True


DEFAULT_OPTIONS = NormalizationOptions()


def load_options(data: Optional[Mapping[str, Any]]) -> NormalizationOptions:
    """Build options from a mapping, rejecting unknown keys and non-boolean values.

    Args:
        data: Mapping with snake_case or camelCase keys, or None for defaults

    Returns:
        Validated NormalizationOptions

    Raises:
        ConfigurationError: If the mapping is malformed
    """
    if data is None:
        return DEFAULT_OPTIONS
    if isinstance(data, NormalizationOptions):
        return data
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"Normalization options must be an object, got {type(data).__name__}")
    try:
        return NormalizationOptions.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid normalization options: {exc}") from exc
