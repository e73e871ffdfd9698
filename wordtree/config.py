#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: config.py
# Author: Wadih Khairallah
# Description: Analysis and layout settings with defaults and validation
# Created: 2025-06-02 11:03:37
# Modified: 2025-06-09 17:48:12

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from wordtree.lexicons import (
    PORTUGUESE_SENTIMENT,
    PORTUGUESE_STOPWORDS,
    load_sentiment_lexicon,
    load_stopwords,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORDS = 100
DEFAULT_MIN_WORD_LENGTH = 2

DEFAULT_CONFIG: Dict[str, Any] = {
    "max_words": DEFAULT_MAX_WORDS,
    "min_word_length": DEFAULT_MIN_WORD_LENGTH,
    "enable_stopword_filter": True,
    "custom_stopwords": (),
    "stopword_lexicon": PORTUGUESE_STOPWORDS,
    "enable_sentiment": True,
    "sentiment_lexicon": PORTUGUESE_SENTIMENT,
}

DEFAULT_LAYOUT: Dict[str, Any] = {
    "node_size": 6,
    "font_scale": 3,
    "link_thickness": 0.5,
    "min_radius": 4,
    "max_radius": 40,
    "min_font_size": 10,
    "max_font_size": 20,
    "color_by_sentiment": False,
}

# Keys only understood by load_config; they resolve into lexicons.
_FILE_KEYS = ("stopwords_file", "lexicon_file")


def _check_int(name: str, value: Any, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{name}' must be an integer, got {value!r}")
    if value < minimum:
        raise ValueError(f"'{name}' must be >= {minimum}, got {value}")


def build_config(
    base: Optional[Dict[str, Any]] = None,
    **overrides: Any
) -> Dict[str, Any]:
    """
    Merge overrides onto a base config and validate the result.

    Args:
        base (Dict): Starting config; DEFAULT_CONFIG when omitted.
        **overrides: Individual settings to replace.

    Returns:
        Dict: A new, validated config.

    Raises:
        ValueError: On unknown keys or out of range values.
    """
    config = dict(DEFAULT_CONFIG)
    if base:
        config.update(base)
    config.update(overrides)

    unknown = sorted(set(config) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

    _check_int("max_words", config["max_words"], 0)
    _check_int("min_word_length", config["min_word_length"], 1)

    custom = config["custom_stopwords"]
    if isinstance(custom, str):
        raise ValueError("'custom_stopwords' must be a list of words, not a string")
    config["custom_stopwords"] = tuple(custom or ())

    if config["stopword_lexicon"] is None:
        config["stopword_lexicon"] = frozenset()
    if config["sentiment_lexicon"] is None:
        config["sentiment_lexicon"] = {}

    config["enable_stopword_filter"] = bool(config["enable_stopword_filter"])
    config["enable_sentiment"] = bool(config["enable_sentiment"])
    return config


def build_layout_settings(
    settings: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Merge layout settings onto DEFAULT_LAYOUT and validate them."""
    merged = dict(DEFAULT_LAYOUT)
    if settings:
        merged.update(settings)

    unknown = sorted(set(merged) - set(DEFAULT_LAYOUT))
    if unknown:
        raise ValueError(f"Unknown layout settings: {', '.join(unknown)}")

    for key in ("node_size", "font_scale", "link_thickness", "min_radius",
                "max_radius", "min_font_size", "max_font_size"):
        value = merged[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
            raise ValueError(f"'{key}' must be a non-negative number, got {value!r}")

    if merged["min_radius"] > merged["max_radius"]:
        raise ValueError("'min_radius' cannot exceed 'max_radius'")
    if merged["min_font_size"] > merged["max_font_size"]:
        raise ValueError("'min_font_size' cannot exceed 'max_font_size'")
    return merged


def load_config(
    path: Union[str, Path]
) -> Dict[str, Any]:
    """
    Load an analysis config from a JSON file.

    Besides the DEFAULT_CONFIG keys the file may name lexicon files via
    ``stopwords_file`` and ``lexicon_file``; relative paths resolve against
    the config file's directory.

    Args:
        path (str | Path): JSON config file.

    Returns:
        Dict: Validated config.
    """
    config_path = Path(path).expanduser()
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid config file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a JSON object")

    for key in ("stopword_lexicon", "sentiment_lexicon"):
        if key in data:
            raise ValueError(f"'{key}' cannot be set inline; use '{_FILE_KEYS[0]}' or '{_FILE_KEYS[1]}'")

    stopwords_file = data.pop("stopwords_file", None)
    lexicon_file = data.pop("lexicon_file", None)

    if stopwords_file:
        data["stopword_lexicon"] = load_stopwords(config_path.parent / stopwords_file)
    if lexicon_file:
        data["sentiment_lexicon"] = load_sentiment_lexicon(config_path.parent / lexicon_file)

    logger.debug(f"Loaded config from {config_path}")
    return build_config(data)
