#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: __init__.py
# Author: Wadih Khairallah
# Description: 
# Created: 2025-06-02 10:02:19
# Modified: 2025-06-09 18:40:31

from .__version__ import __version__
from .analysis import analyze
from .config import (
    DEFAULT_CONFIG,
    DEFAULT_LAYOUT,
    build_config,
    load_config,
)
from .context import (
    extract_fragments,
    build_tree_from_fragments,
    build_context_tree,
    tree_summary,
    tree_to_graph,
)
from .layout import (
    layout_tree,
    tree_links,
)
from .lexicons import (
    PORTUGUESE_STOPWORDS,
    PORTUGUESE_SENTIMENT,
    load_stopwords,
    load_sentiment_lexicon,
    nltk_stopwords,
)
from .preprocess import (
    normalize_text,
    tokenize,
    filter_stopwords,
    rank_frequencies,
    suggest_target_words,
)
from .sentiment import (
    score_word,
    aggregate_sentiment,
)

__all__ = [
    "__version__",
    "analyze",
    "DEFAULT_CONFIG",
    "DEFAULT_LAYOUT",
    "build_config",
    "load_config",
    "extract_fragments",
    "build_tree_from_fragments",
    "build_context_tree",
    "tree_summary",
    "tree_to_graph",
    "layout_tree",
    "tree_links",
    "PORTUGUESE_STOPWORDS",
    "PORTUGUESE_SENTIMENT",
    "load_stopwords",
    "load_sentiment_lexicon",
    "nltk_stopwords",
    "normalize_text",
    "tokenize",
    "filter_stopwords",
    "rank_frequencies",
    "suggest_target_words",
    "score_word",
    "aggregate_sentiment"
]
