"""
Text Preprocessing Module

Normalization, tokenization, stopword filtering and frequency ranking.
"""

import re
import logging
import unicodedata
from typing import Dict, List, Any, Tuple, Iterable, Optional, AbstractSet, Mapping, Union
from collections import Counter

from nltk.tokenize import WhitespaceTokenizer

# Setup logger
logger = logging.getLogger(__name__)

# Letters of the target alphabet; everything else becomes a space
ACCENTED_LETTERS = "áéíóúàèìòùâêîôûãõç"
_NON_LETTER = re.compile(rf"[^a-z{ACCENTED_LETTERS}\s]")
_WHITESPACE = re.compile(r"\s+")
_WORD = re.compile(r"\b(\w+)\b")

_tokenizer = WhitespaceTokenizer()


def _fold(word: str) -> str:
    return unicodedata.normalize("NFKC", word).strip().lower()


def normalize_text(text: str) -> str:
    """
    Lowercase text, blank out non-letters and collapse whitespace.

    Args:
        text (str): Raw input text

    Returns:
        str: Normalized single-spaced text
    """
    if not text:
        return ""
    text = unicodedata.normalize("NFKC", text).lower()
    text = _NON_LETTER.sub(" ", text)
    return _WHITESPACE.sub(" ", text).strip()


def tokenize(text: str, min_word_length: int = 2) -> List[str]:
    """
    Split text into normalized tokens in document order.

    Args:
        text (str): Raw input text
        min_word_length (int): Tokens shorter than this are dropped

    Returns:
        List[str]: Tokens, duplicates retained
    """
    tokens = [
        token for token in _tokenizer.tokenize(normalize_text(text))
        if len(token) >= min_word_length
    ]
    logger.debug(f"Tokenized {len(tokens)} words (min length {min_word_length})")
    return tokens


def filter_stopwords(
    tokens: Iterable[str],
    stopword_lexicon: Union[AbstractSet[str], Mapping[str, bool]],
    enabled: bool = True,
    custom_stopwords: Iterable[str] = ()
) -> Tuple[List[str], List[str]]:
    """
    Partition tokens into kept and removed lists.

    Args:
        tokens (Iterable[str]): Tokens to route
        stopword_lexicon (Set[str] | Mapping[str, bool]): Base language
            stopwords; in a mapping only words with a true value count
        enabled (bool): Whether the base lexicon applies
        custom_stopwords (Iterable[str]): Extra user stopwords, always applied

    Returns:
        Tuple[List[str], List[str]]: (kept, removed), both in input order
    """
    if not enabled:
        stop_words = set()
    elif isinstance(stopword_lexicon, Mapping):
        stop_words = {_fold(word) for word, is_stop in stopword_lexicon.items() if is_stop}
    else:
        stop_words = {_fold(word) for word in stopword_lexicon}
    stop_words.update(
        _fold(word) for word in custom_stopwords if word and word.strip()
    )

    kept: List[str] = []
    removed: List[str] = []
    for token in tokens:
        if _fold(token) in stop_words:
            removed.append(token)
        else:
            kept.append(token)

    logger.debug(f"Stopword filter kept {len(kept)}, removed {len(removed)}")
    return kept, removed


def rank_frequencies(
    tokens: Iterable[str],
    limit: Optional[int] = None
) -> List[Tuple[str, int]]:
    """
    Count tokens and sort by count descending, then word ascending.

    Args:
        tokens (Iterable[str]): Tokens to count
        limit (int): Keep only the first ``limit`` entries when given

    Returns:
        List[Tuple[str, int]]: (word, count) pairs
    """
    ranked = sorted(Counter(tokens).items(), key=lambda item: (-item[1], item[0]))
    if limit is not None:
        ranked = ranked[:limit]
    return ranked


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def filtering_stats(
    kept: List[str],
    removed: List[str],
    ranked_kept: List[Tuple[str, int]]
) -> Dict[str, Any]:
    """
    Aggregate counters describing one filtering run.

    Args:
        kept (List[str]): Tokens that survived the stopword filter
        removed (List[str]): Tokens routed to the removed list
        ranked_kept (List[Tuple[str, int]]): Truncated ranked kept list

    Returns:
        Dict: Filtering statistics
    """
    total = len(kept) + len(removed)
    distinct_kept = set(kept)
    distinct_removed = set(removed)

    return {
        "total_words": total,
        "unique_words": len(distinct_kept | distinct_removed),
        "filtered_words": len(distinct_kept),
        "stop_words_removed": len(distinct_removed),
        "final_words": len(ranked_kept),
        "filtering_efficiency": _round_half_up(100 * len(removed) / total) if total else 0,
    }


def suggest_target_words(
    text: str,
    limit: int = 15,
    min_length: int = 3
) -> List[str]:
    """
    Words worth exploring as context tree roots.

    Only words of at least ``min_length`` word characters that occur more
    than once qualify. Most frequent first; equal counts keep the order of
    first appearance.
    """
    if not text:
        return []

    counts = Counter(
        word for word in _WORD.findall(unicodedata.normalize("NFKC", text).lower()) if len(word) >= min_length
    )
    repeated = [word for word, count in counts.items() if count > 1]
    repeated.sort(key=lambda word: -counts[word])
    return repeated[:limit]
