"""
Context Tree Module

Sentence fragments around a target word and the frequency ranked tree of
the words that follow it.
"""

import re
import logging
import unicodedata
from typing import Dict, List, Any, Iterator, Optional, Tuple

import networkx as nx
from nltk.tokenize import WhitespaceTokenizer

# Setup logger
logger = logging.getLogger(__name__)

WORDS_BEFORE = 4
WORDS_AFTER = 6
MAX_FIRST_LEVEL = 8
MAX_SECOND_LEVEL = 4
MAX_DEPTH = 2

MATCH_MODES = ("exact", "substring")
TIE_BREAKS = ("first_seen", "alphabetical")

_SENTENCE_END = re.compile(r"[.!?]+")
_NON_WORD = re.compile(r"[^\w]")

_tokenizer = WhitespaceTokenizer()


def clean_token(token: str) -> str:
    """Lowercase a raw token and drop every non-word character."""
    return _NON_WORD.sub("", unicodedata.normalize("NFKC", token).lower())


def split_sentences(text: str) -> List[str]:
    """
    Split text on runs of sentence punctuation.

    Each sentence is trimmed; its closing punctuation run becomes a single
    period.
    """
    if not text:
        return []
    marked = _SENTENCE_END.sub(".|", text)
    return [sentence.strip() for sentence in marked.split("|") if sentence.strip()]


def extract_fragments(
    text: str,
    target: str,
    match: str = "exact"
) -> List[Dict[str, Any]]:
    """
    Capture the words around every occurrence of a target word.

    Args:
        text (str): Raw source text
        target (str): Word to look for, case-insensitive
        match (str): "exact" compares cleaned tokens with the target,
            "substring" also accepts tokens that contain it

    Returns:
        List[Dict]: Fragments with before, after, full_sentence and position
    """
    if match not in MATCH_MODES:
        raise ValueError(f"Unknown match mode '{match}', expected one of {MATCH_MODES}")

    target_clean = unicodedata.normalize("NFKC", target or "").strip().lower()
    if not text or not target_clean:
        return []

    text = unicodedata.normalize("NFKC", text)

    fragments = []
    for sentence_index, sentence in enumerate(split_sentences(text)):
        words = _tokenizer.tokenize(sentence)
        for index, word in enumerate(words):
            cleaned = clean_token(word)
            if cleaned != target_clean and not (match == "substring" and target_clean in cleaned):
                continue

            after = words[index + 1:index + 1 + WORDS_AFTER]
            if not after:
                continue

            fragments.append({
                "before": words[max(0, index - WORDS_BEFORE):index],
                "after": after,
                "full_sentence": sentence,
                "position": sentence_index * 1000 + index,
            })

    logger.debug(f"Extracted {len(fragments)} fragments for '{target_clean}'")
    return fragments


def _group_by_follower(
    fragments: List[Dict[str, Any]],
    offset: int,
    limit: int,
    tie_break: str
) -> List[Tuple[str, List[Dict[str, Any]]]]:
    groups: Dict[str, List[Dict[str, Any]]] = {}
    for fragment in fragments:
        if len(fragment["after"]) <= offset:
            continue
        word = clean_token(fragment["after"][offset])
        # Single characters carry no context
        if len(word) <= 1:
            continue
        groups.setdefault(word, []).append(fragment)

    if tie_break == "alphabetical":
        ordered = sorted(groups.items(), key=lambda item: (-len(item[1]), item[0]))
    else:
        ordered = sorted(groups.items(), key=lambda item: -len(item[1]))
    return ordered[:limit]


def build_tree_from_fragments(
    fragments: List[Dict[str, Any]],
    target: str,
    tie_break: str = "first_seen"
) -> Optional[Dict[str, Any]]:
    """
    Build the depth limited context tree for a target word.

    Level 1 holds the top first-following words, level 2 the top
    second-following words within each level 1 group.

    Args:
        fragments (List[Dict]): Output of extract_fragments
        target (str): Root word
        tie_break (str): "first_seen" keeps group discovery order for equal
            counts, "alphabetical" orders them by word

    Returns:
        Optional[Dict]: Root node, or None without fragments
    """
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"Unknown tie break '{tie_break}', expected one of {TIE_BREAKS}")

    if not fragments:
        return None

    root = {"word": target, "count": len(fragments), "depth": 0, "children": []}

    for first_word, group in _group_by_follower(fragments, 0, MAX_FIRST_LEVEL, tie_break):
        child = {"word": first_word, "count": len(group), "depth": 1, "children": []}
        for second_word, subgroup in _group_by_follower(group, 1, MAX_SECOND_LEVEL, tie_break):
            child["children"].append({
                "word": second_word,
                "count": len(subgroup),
                "depth": 2,
                "children": [],
            })
        root["children"].append(child)

    return root


def build_context_tree(
    text: str,
    target: str,
    match: str = "exact",
    tie_break: str = "first_seen"
) -> Optional[Dict[str, Any]]:
    """
    Extract fragments for ``target`` and build its context tree.

    Returns None when the text is empty or the word never occurs with a
    following word.
    """
    fragments = extract_fragments(text, target, match=match)
    root_word = unicodedata.normalize("NFKC", target or "").strip()
    tree = build_tree_from_fragments(fragments, root_word, tie_break=tie_break)
    if tree is not None:
        summary = tree_summary(tree)
        logger.debug(
            f"Context tree for '{summary['word']}': {summary['direct_contexts']} direct, "
            f"{summary['sub_contexts']} sub contexts"
        )
    return tree


def iter_nodes(tree: Optional[Dict[str, Any]]) -> Iterator[Dict[str, Any]]:
    """Yield every node of a tree, depth first, parents before children."""
    if tree is None:
        return
    stack = [tree]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.get("children", [])))


def tree_summary(tree: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Root occurrences plus the number of level 1 and level 2 contexts."""
    if tree is None:
        return {"word": None, "occurrences": 0, "direct_contexts": 0, "sub_contexts": 0}

    children = tree.get("children", [])
    return {
        "word": tree["word"],
        "occurrences": tree["count"],
        "direct_contexts": len(children),
        "sub_contexts": sum(len(child.get("children", [])) for child in children),
    }


def tree_to_graph(tree: Optional[Dict[str, Any]]) -> nx.DiGraph:
    """
    Convert a context tree into a directed graph.

    Nodes are keyed by the tuple of words from the root, so the same word
    under different parents stays distinct. Edge weight is the child count.
    """
    G = nx.DiGraph()
    if tree is None:
        return G

    stack = [((tree["word"],), tree)]
    while stack:
        key, node = stack.pop()
        G.add_node(key, word=node["word"], count=node["count"], depth=node["depth"])
        for child in node.get("children", []):
            child_key = key + (child["word"],)
            G.add_node(child_key, word=child["word"], count=child["count"], depth=child["depth"])
            G.add_edge(key, child_key, weight=child["count"])
            stack.append((child_key, child))
    return G
