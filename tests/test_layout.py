#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: test_layout.py
# Description: Tests for the context tree layout
# Created: 2025-06-06
# Modified: 2025-06-09 17:30:46

import copy
import unittest

from wordtree.context import build_context_tree, iter_nodes
from wordtree.layout import (
    HIGHLIGHT_COLOR,
    INTERNAL_COLOR,
    LEAF_COLOR,
    layout_tree,
    tree_links,
)
from wordtree.lexicons import PORTUGUESE_SENTIMENT

SCENARIO = "o gato corre o gato pula o cão corre"


def node(word, count, depth, children=None):
    return {"word": word, "count": count, "depth": depth, "children": children or []}


class LayoutTestCase(unittest.TestCase):

    def setUp(self):
        self.tree = build_context_tree(SCENARIO, "o")

    def test_coordinates(self):
        layout = layout_tree(self.tree, 800, 600)
        self.assertEqual((layout["x"], layout["y"]), (90, 300))

        gato, cao = layout["children"]
        self.assertEqual((gato["x"], gato["y"]), (400, 170))
        self.assertEqual((cao["x"], cao["y"]), (400, 430))

        corre, pula = gato["children"]
        self.assertEqual((corre["x"], corre["y"]), (710, 105))
        self.assertEqual((pula["x"], pula["y"]), (710, 235))

    def test_same_input_same_layout(self):
        self.assertEqual(layout_tree(self.tree, 640, 480), layout_tree(self.tree, 640, 480))

    def test_source_tree_is_not_mutated(self):
        before = copy.deepcopy(self.tree)
        layout_tree(self.tree, 800, 600, highlight="gato")
        self.assertEqual(self.tree, before)

    def test_counts_and_words_survive(self):
        layout = layout_tree(self.tree, 800, 600)
        self.assertEqual(
            [(n["word"], n["count"], n["depth"]) for n in iter_nodes(layout)],
            [(n["word"], n["count"], n["depth"]) for n in iter_nodes(self.tree)]
        )

    def test_sizes_grow_with_count_and_are_clamped(self):
        tree = node("raiz", 20, 0, [node("meio", 5, 1, [node("folha", 1, 2)])])
        layout = layout_tree(tree, 800, 600)
        middle = layout["children"][0]
        leaf = middle["children"][0]

        self.assertEqual(layout["radius"], 40)
        self.assertEqual(middle["radius"], 15)
        self.assertEqual(leaf["radius"], 9)

        self.assertEqual(layout["font_size"], 20)
        self.assertEqual(middle["font_size"], 12)
        self.assertEqual(leaf["font_size"], 10)

    def test_root_is_never_smaller(self):
        layout = layout_tree(build_context_tree(SCENARIO, "o", match="substring"), 800, 600)
        for descendant in list(iter_nodes(layout))[1:]:
            self.assertGreaterEqual(layout["radius"], descendant["radius"])
            self.assertGreaterEqual(layout["font_size"], descendant["font_size"])

    def test_colors(self):
        layout = layout_tree(self.tree, 800, 600)
        self.assertEqual(layout["color"], INTERNAL_COLOR)
        self.assertEqual(layout["children"][0]["color"], INTERNAL_COLOR)
        self.assertEqual(layout["children"][1]["color"], LEAF_COLOR)

    def test_sentiment_colors(self):
        tree = node("dia", 2, 0, [node("excelente", 1, 1), node("ruim", 1, 1)])
        layout = layout_tree(
            tree, 800, 600,
            settings={"color_by_sentiment": True},
            sentiment_lexicon=PORTUGUESE_SENTIMENT,
        )
        self.assertEqual(layout["color"], "#6b7280")
        self.assertEqual(layout["children"][0]["color"], "#15803d")
        self.assertEqual(layout["children"][1]["color"], "#dc2626")

    def test_highlight(self):
        layout = layout_tree(self.tree, 800, 600, highlight="GAT")
        gato = layout["children"][0]
        self.assertTrue(gato["highlighted"])
        self.assertEqual(gato["color"], HIGHLIGHT_COLOR)
        self.assertEqual(gato["radius"], 13.5)
        self.assertEqual(gato["font_size"], 11.5)
        self.assertFalse(layout["highlighted"])

    def test_lone_root_is_centered(self):
        layout = layout_tree(node("só", 1, 0), 800, 600)
        self.assertEqual((layout["x"], layout["y"]), (400, 300))

    def test_small_viewport_shrinks_margins(self):
        layout = layout_tree(self.tree, 160, 80)
        self.assertEqual((layout["x"], layout["y"]), (20, 40))
        leaf_x = max(n["x"] for n in iter_nodes(layout))
        self.assertEqual(leaf_x, 140)

    def test_null_and_invalid(self):
        self.assertIsNone(layout_tree(None, 800, 600))
        with self.assertRaises(ValueError):
            layout_tree(self.tree, 0, 600)
        with self.assertRaises(ValueError):
            layout_tree(self.tree, 800, 600, settings={"node_shape": "square"})


class LinksTestCase(unittest.TestCase):

    def test_links(self):
        tree = build_context_tree(SCENARIO, "o")
        layout = layout_tree(tree, 800, 600, highlight="pula")
        links = tree_links(layout)

        self.assertEqual(
            [(link["source"], link["target"]) for link in links],
            [("o", "gato"), ("o", "cão"), ("gato", "corre"), ("gato", "pula")]
        )
        self.assertEqual(links[0]["width"], 1)
        self.assertEqual(links[3]["width"], 1.5)
        self.assertTrue(links[3]["highlighted"])
        self.assertEqual((links[0]["source_x"], links[0]["target_y"]), (90, 170))

    def test_thickness_setting(self):
        tree = node("raiz", 10, 0, [node("filho", 8, 1)])
        links = tree_links(layout_tree(tree, 800, 600), settings={"link_thickness": 2})
        self.assertEqual(links[0]["width"], 16)

    def test_no_layout(self):
        self.assertEqual(tree_links(None), [])


if __name__ == "__main__":
    unittest.main()
