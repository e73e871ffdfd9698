"""
Sentiment Module

Lexicon based word polarity scoring and document level aggregation.
"""

import logging
from typing import Dict, Any, Mapping, Optional, Sequence, Tuple

import numpy as np

from wordtree.lexicons import CATEGORIES, NEGATIVE, NEUTRAL, POSITIVE

# Setup logger
logger = logging.getLogger(__name__)

SENTIMENT_PALETTES = {
    POSITIVE: ["#22c55e", "#16a34a", "#15803d", "#166534", "#14532d"],
    NEGATIVE: ["#ef4444", "#dc2626", "#b91c1c", "#991b1b", "#7f1d1d"],
    NEUTRAL: ["#6b7280", "#4b5563", "#374151", "#1f2937", "#111827"],
}


def score_word(
    word: str,
    lexicon: Mapping[str, Tuple[str, float]]
) -> Dict[str, Any]:
    """
    Look up the polarity of a single word.

    Args:
        word (str): Word to score
        lexicon (Mapping): word -> (category, intensity)

    Returns:
        Dict: {"score": signed intensity, "category": category}
    """
    entry = lexicon.get(word.lower()) if word else None
    if entry is None:
        return {"score": 0, "category": NEUTRAL}

    category, intensity = entry
    if category == POSITIVE:
        score = abs(intensity)
    elif category == NEGATIVE:
        score = -abs(intensity)
    else:
        category, score = NEUTRAL, 0
    return {"score": score, "category": category}


def _distribution(totals: Dict[str, int]) -> Dict[str, int]:
    """Integer percentages per category that add up to exactly 100."""
    occurrences = sum(totals.values())
    percentages = {
        category: int(100 * totals[category] / occurrences + 0.5)
        for category in CATEGORIES
    }
    # The largest bucket absorbs the rounding remainder
    largest = max(CATEGORIES, key=lambda category: totals[category])
    percentages[largest] += 100 - sum(percentages.values())
    return percentages


def aggregate_sentiment(
    words: Sequence[Dict[str, Any]]
) -> Dict[str, Any]:
    """
    Combine per-word sentiment into document level statistics.

    Args:
        words (Sequence[Dict]): Entries carrying "count" and "sentiment"

    Returns:
        Dict: overall category, mean score, count-weighted score and
        percentage distribution
    """
    scored = [entry for entry in words if entry.get("sentiment")]
    if not scored:
        return {
            "overall": NEUTRAL,
            "score": 0,
            "weighted_score": 0,
            "distribution": {POSITIVE: 0, NEGATIVE: 0, NEUTRAL: 0},
        }

    scores = np.array([entry["sentiment"]["score"] for entry in scored], dtype=float)
    counts = np.array([entry["count"] for entry in scored], dtype=float)

    totals = {category: 0 for category in CATEGORIES}
    for entry in scored:
        totals[entry["sentiment"]["category"]] += entry["count"]

    # Ties go to neutral
    top = max(totals.values())
    leaders = [category for category in CATEGORIES if totals[category] == top]
    overall = leaders[0] if len(leaders) == 1 else NEUTRAL

    result = {
        "overall": overall,
        "score": round(float(scores.mean()), 2),
        "weighted_score": round(float(np.average(scores, weights=counts)), 2),
        "distribution": _distribution(totals),
    }
    logger.debug(f"Sentiment over {len(scored)} words: {result['overall']}")
    return result


def sentiment_color(category: str, intensity: Optional[float] = 1) -> str:
    """
    Palette color for a sentiment category; stronger intensity is darker.
    """
    palette = SENTIMENT_PALETTES.get(category, SENTIMENT_PALETTES[NEUTRAL])
    level = int(min(len(palette), max(1, abs(intensity or 1))))
    return palette[level - 1]
