#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: test_sentiment.py
# Description: Tests for word scoring and sentiment aggregation
# Created: 2025-06-04
# Modified: 2025-06-09 16:20:03

import unittest

from wordtree.lexicons import PORTUGUESE_SENTIMENT
from wordtree.sentiment import score_word, aggregate_sentiment, sentiment_color


def entry(word, count, score, category):
    return {"word": word, "count": count, "sentiment": {"score": score, "category": category}}


class ScoreWordTestCase(unittest.TestCase):

    def test_positive_and_negative(self):
        self.assertEqual(score_word("Excelente", PORTUGUESE_SENTIMENT), {"score": 3, "category": "positive"})
        self.assertEqual(score_word("ruim", PORTUGUESE_SENTIMENT), {"score": -2, "category": "negative"})

    def test_unknown_word_is_neutral(self):
        self.assertEqual(score_word("mesa", PORTUGUESE_SENTIMENT), {"score": 0, "category": "neutral"})
        self.assertEqual(score_word("", PORTUGUESE_SENTIMENT), {"score": 0, "category": "neutral"})

    def test_neutral_entry_scores_zero(self):
        lexicon = {"talvez": ("neutral", 2)}
        self.assertEqual(score_word("talvez", lexicon), {"score": 0, "category": "neutral"})


class AggregateTestCase(unittest.TestCase):

    def test_empty(self):
        self.assertEqual(aggregate_sentiment([]), {
            "overall": "neutral",
            "score": 0,
            "weighted_score": 0,
            "distribution": {"positive": 0, "negative": 0, "neutral": 0},
        })

    def test_weighted_overall(self):
        stats = aggregate_sentiment([
            entry("bom", 3, 2, "positive"),
            entry("mau", 1, -1, "negative"),
            entry("mesa", 1, 0, "neutral"),
        ])
        self.assertEqual(stats["overall"], "positive")
        self.assertEqual(stats["score"], 0.33)
        self.assertEqual(stats["weighted_score"], 1.0)
        self.assertEqual(stats["distribution"], {"positive": 60, "negative": 20, "neutral": 20})

    def test_tie_goes_to_neutral(self):
        stats = aggregate_sentiment([
            entry("bom", 2, 1, "positive"),
            entry("mau", 2, -1, "negative"),
        ])
        self.assertEqual(stats["overall"], "neutral")
        self.assertEqual(stats["distribution"], {"positive": 50, "negative": 50, "neutral": 0})

    def test_distribution_sums_to_100(self):
        stats = aggregate_sentiment([
            entry("bom", 1, 1, "positive"),
            entry("mau", 1, -1, "negative"),
            entry("mesa", 1, 0, "neutral"),
        ])
        self.assertEqual(sum(stats["distribution"].values()), 100)

        stats = aggregate_sentiment([
            entry("bom", 1, 1, "positive"),
            entry("mau", 5, -1, "negative"),
            entry("mesa", 1, 0, "neutral"),
        ])
        self.assertEqual(stats["overall"], "negative")
        self.assertEqual(sum(stats["distribution"].values()), 100)

    def test_entries_without_sentiment_are_skipped(self):
        stats = aggregate_sentiment([{"word": "gato", "count": 4, "sentiment": None}])
        self.assertEqual(stats["overall"], "neutral")
        self.assertEqual(stats["distribution"], {"positive": 0, "negative": 0, "neutral": 0})


class SentimentColorTestCase(unittest.TestCase):

    def test_palette_by_intensity(self):
        self.assertEqual(sentiment_color("positive", 1), "#22c55e")
        self.assertEqual(sentiment_color("negative", -3), "#b91c1c")
        self.assertEqual(sentiment_color("positive", 9), "#14532d")

    def test_unknown_category_uses_neutral(self):
        self.assertEqual(sentiment_color("mixed", 0), "#6b7280")


if __name__ == "__main__":
    unittest.main()
