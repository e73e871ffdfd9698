"""
Tree Layout Module

Planar coordinates and sizes for rendering a context tree left to right.
"""

import logging
from typing import Dict, List, Any, Mapping, Optional, Tuple

import numpy as np

from wordtree.config import build_layout_settings
from wordtree.context import iter_nodes
from wordtree.sentiment import score_word, sentiment_color

# Setup logger
logger = logging.getLogger(__name__)

MARGIN_X = 90
MARGIN_Y = 40

HIGHLIGHT_COLOR = "#ff6b6b"
INTERNAL_COLOR = "#4a98c9"
LEAF_COLOR = "#5ab769"

HIGHLIGHT_RADIUS_FACTOR = 1.5
HIGHLIGHT_FONT_FACTOR = 1.15
HIGHLIGHT_LINK_FACTOR = 1.5


def _is_highlighted(word: str, highlight: Optional[str]) -> bool:
    return bool(highlight) and highlight.lower() in word.lower()


def _node_sizes(count: int, settings: Dict[str, Any]) -> Tuple[float, float]:
    """Radius and font size, both non-decreasing in count."""
    node_size = settings["node_size"]
    radius = max(node_size * 1.5, count * node_size * 0.5)
    radius = np.clip(radius, settings["min_radius"], settings["max_radius"])
    font_size = np.clip(
        count * settings["font_scale"] * 0.8,
        settings["min_font_size"],
        settings["max_font_size"],
    )
    return float(radius), float(font_size)


def _node_color(
    node: Dict[str, Any],
    highlighted: bool,
    settings: Dict[str, Any],
    sentiment_lexicon: Optional[Mapping[str, Tuple[str, float]]]
) -> str:
    if highlighted:
        return HIGHLIGHT_COLOR
    if settings["color_by_sentiment"] and sentiment_lexicon is not None:
        sentiment = score_word(node["word"], sentiment_lexicon)
        return sentiment_color(sentiment["category"], sentiment["score"])
    return INTERNAL_COLOR if node.get("children") else LEAF_COLOR


def _place(
    node: Dict[str, Any],
    slot_top: float,
    slot_height: float,
    geometry: Dict[str, float],
    settings: Dict[str, Any],
    highlight: Optional[str],
    sentiment_lexicon: Optional[Mapping[str, Tuple[str, float]]]
) -> Dict[str, Any]:
    highlighted = _is_highlighted(node["word"], highlight)
    radius, font_size = _node_sizes(node["count"], settings)
    if highlighted:
        radius *= HIGHLIGHT_RADIUS_FACTOR
        font_size *= HIGHLIGHT_FONT_FACTOR

    placed = {
        "word": node["word"],
        "count": node["count"],
        "depth": node["depth"],
        "x": round(geometry["left"] + node["depth"] * geometry["step"], 2),
        "y": round(slot_top + slot_height / 2, 2),
        "radius": round(radius, 2),
        "font_size": round(font_size, 2),
        "color": _node_color(node, highlighted, settings, sentiment_lexicon),
        "highlighted": highlighted,
        "children": [],
    }

    children = node.get("children", [])
    if children:
        child_height = slot_height / len(children)
        tops = slot_top + np.arange(len(children)) * child_height
        for child, top in zip(children, tops):
            placed["children"].append(
                _place(child, float(top), child_height, geometry, settings,
                       highlight, sentiment_lexicon)
            )
    return placed


def layout_tree(
    tree: Optional[Dict[str, Any]],
    width: float = 800,
    height: float = 600,
    settings: Optional[Dict[str, Any]] = None,
    highlight: Optional[str] = None,
    sentiment_lexicon: Optional[Mapping[str, Tuple[str, float]]] = None
) -> Optional[Dict[str, Any]]:
    """
    Annotate a context tree with coordinates, sizes and colors.

    The root sits at the left edge, vertically centered. Each depth level
    advances by a fixed horizontal step and every node splits its vertical
    slot evenly among its children. The input tree is left untouched.

    Args:
        tree (Dict): Root node from build_context_tree
        width (float): Viewport width
        height (float): Viewport height
        settings (Dict): Overrides for wordtree.config.DEFAULT_LAYOUT
        highlight (str): Search term; matching nodes are emphasized
        sentiment_lexicon (Mapping): Used when settings enable
            color_by_sentiment

    Returns:
        Optional[Dict]: Laid out copy of the tree, None for a None tree
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Viewport must be positive, got {width}x{height}")

    if tree is None:
        return None

    settings = build_layout_settings(settings)

    margin_x = min(MARGIN_X, width / 8)
    margin_y = min(MARGIN_Y, height / 8)
    inner_width = width - 2 * margin_x
    inner_height = height - 2 * margin_y

    max_depth = max(node["depth"] for node in iter_nodes(tree))
    if max_depth == 0:
        # A lone root is centered on both axes
        geometry = {"left": width / 2, "step": 0.0}
    else:
        geometry = {"left": margin_x, "step": inner_width / max_depth}

    layout = _place(tree, margin_y, inner_height, geometry, settings,
                    highlight, sentiment_lexicon)
    logger.debug(f"Laid out tree '{tree['word']}' in {width}x{height}")
    return layout


def tree_links(
    layout: Optional[Dict[str, Any]],
    settings: Optional[Dict[str, Any]] = None
) -> List[Dict[str, Any]]:
    """
    Parent to child edges of a laid out tree, with stroke widths.

    Width grows with the child's count; links touching a highlighted node
    are drawn thicker.
    """
    if layout is None:
        return []

    settings = build_layout_settings(settings)
    links = []
    for parent in iter_nodes(layout):
        for child in parent["children"]:
            highlighted = parent["highlighted"] or child["highlighted"]
            width = max(1, child["count"] * settings["link_thickness"])
            if highlighted:
                width *= HIGHLIGHT_LINK_FACTOR
            links.append({
                "source": parent["word"],
                "target": child["word"],
                "source_x": parent["x"],
                "source_y": parent["y"],
                "target_x": child["x"],
                "target_y": child["y"],
                "width": round(width, 2),
                "highlighted": highlighted,
            })
    return links
