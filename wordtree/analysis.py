"""
Text Analysis Module

Ranked word statistics with stopword filtering and sentiment annotation.
"""

import logging
from typing import Dict, List, Any, Optional, Tuple

from wordtree.config import build_config
from wordtree.preprocess import (
    tokenize,
    filter_stopwords,
    rank_frequencies,
    filtering_stats,
)
from wordtree.sentiment import score_word, aggregate_sentiment

# Setup logger
logger = logging.getLogger(__name__)


def _word_entries(
    ranked: List[Tuple[str, int]],
    is_filtered: bool,
    config: Dict[str, Any]
) -> List[Dict[str, Any]]:
    lexicon = config["sentiment_lexicon"]
    return [
        {
            "word": word,
            "count": count,
            "rank": index + 1,
            "is_filtered": is_filtered,
            "sentiment": score_word(word, lexicon) if config["enable_sentiment"] else None,
        }
        for index, (word, count) in enumerate(ranked)
    ]


def analyze(
    text: str,
    config: Optional[Dict[str, Any]] = None,
    **overrides: Any
) -> Dict[str, Any]:
    """
    Rank the words of a text and annotate them with sentiment.

    Args:
        text (str): Input text
        config (Dict): Analysis settings, see wordtree.config.DEFAULT_CONFIG
        **overrides: Individual settings applied on top of ``config``

    Returns:
        Dict: ranked_words, filtered_words, filtering_stats, sentiment_stats

    Raises:
        ValueError: When the config is invalid
    """
    config = build_config(config, **overrides)

    tokens = tokenize(text or "", config["min_word_length"])
    kept, removed = filter_stopwords(
        tokens,
        config["stopword_lexicon"],
        enabled=config["enable_stopword_filter"],
        custom_stopwords=config["custom_stopwords"],
    )

    ranked_kept = rank_frequencies(kept, limit=config["max_words"])
    ranked_removed = rank_frequencies(removed)

    ranked_words = _word_entries(ranked_kept, False, config)
    filtered_words = _word_entries(ranked_removed, True, config)

    stats = filtering_stats(kept, removed, ranked_kept)
    sentiment_stats = aggregate_sentiment(ranked_words)

    logger.debug(
        f"Analyzed {stats['total_words']} words: {stats['final_words']} ranked, "
        f"{stats['stop_words_removed']} distinct stopwords removed"
    )

    return {
        "ranked_words": ranked_words,
        "filtered_words": filtered_words,
        "filtering_stats": stats,
        "sentiment_stats": sentiment_stats,
    }
