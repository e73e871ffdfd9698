#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: test_cli.py
# Description: Tests for the wordtree command line interface
# Created: 2025-06-07
# Modified: 2025-06-09 18:12:27

import json
import os
import shutil
import tempfile
import unittest

from click.testing import CliRunner

from wordtree.cli import cli

SCENARIO = "o gato corre o gato pula o cão corre"


class CliTestCase(unittest.TestCase):
    """Base class for CLI test cases with helper methods"""

    def setUp(self):
        self.runner = CliRunner()
        self.temp_dir = tempfile.mkdtemp()
        self.txt_file = os.path.join(self.temp_dir, "sample.txt")
        with open(self.txt_file, "w", encoding="utf-8") as f:
            f.write("O gato corre pela casa. O gato dorme no sofá! Um gato feliz.")

    def tearDown(self):
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def run_command(self, args, input=None):
        return self.runner.invoke(cli, args, input=input)

    def run_json(self, args, input=None):
        result = self.run_command(args + ["--json"], input=input)
        self.assertEqual(result.exit_code, 0, result.output)
        return json.loads(result.output)


class AnalyzeCommandTestCase(CliTestCase):

    def test_json_from_file(self):
        data = self.run_json(["analyze", self.txt_file])
        words = {w["word"]: w["count"] for w in data["ranked_words"]}
        self.assertEqual(words["gato"], 3)
        self.assertNotIn("filtered_words", data)
        self.assertEqual(data["source"], os.path.realpath(self.txt_file))
        self.assertIn("timestamp", data)

    def test_stdin_with_custom_stopword(self):
        data = self.run_json(
            ["analyze", "--stopword", "gato", "--show-filtered"],
            input="o gato corre"
        )
        self.assertEqual([w["word"] for w in data["ranked_words"]], ["corre"])
        self.assertEqual(data["filtered_words"][0]["word"], "gato")
        self.assertEqual(data["filtered_words"][0]["count"], 1)

    def test_options(self):
        data = self.run_json(
            ["analyze", "--min-length", "1", "--no-stopwords", "--max-words", "2", "--no-sentiment"],
            input=SCENARIO
        )
        self.assertEqual([w["word"] for w in data["ranked_words"]], ["o", "corre"])
        self.assertIsNone(data["ranked_words"][0]["sentiment"])
        self.assertEqual(data["filtering_stats"]["final_words"], 2)

    def test_config_and_lexicon_files(self):
        lexicon = os.path.join(self.temp_dir, "lex.json")
        with open(lexicon, "w", encoding="utf-8") as f:
            json.dump({"gato": 3}, f)
        config = os.path.join(self.temp_dir, "settings.json")
        with open(config, "w", encoding="utf-8") as f:
            json.dump({"max_words": 1}, f)

        data = self.run_json(["analyze", self.txt_file, "--config", config, "--lexicon-file", lexicon])
        self.assertEqual(len(data["ranked_words"]), 1)
        self.assertEqual(data["ranked_words"][0]["sentiment"], {"score": 3, "category": "positive"})
        self.assertEqual(data["sentiment_stats"]["overall"], "positive")

    def test_rich_output(self):
        result = self.run_command(["analyze", "--sample", "--show-filtered"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Ranked words", result.output)
        self.assertIn("Removed stopwords", result.output)
        self.assertIn("Sentiment", result.output)

    def test_save_output(self):
        target = os.path.join(self.temp_dir, "out.json")
        result = self.run_command(["analyze", self.txt_file, "--json", "--output", target])
        self.assertEqual(result.exit_code, 0, result.output)
        with open(target, encoding="utf-8") as f:
            self.assertIn("ranked_words", json.load(f))

    def test_no_input(self):
        result = self.run_command(["analyze"], input="")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("No input text provided", result.output)

    def test_errors_exit_non_zero(self):
        result = self.run_command(["analyze", "--min-length", "0"], input=SCENARIO)
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error", result.output)

        result = self.run_command(["analyze", "--config", os.path.join(self.temp_dir, "nope.json")], input=SCENARIO)
        self.assertEqual(result.exit_code, 1)

        result = self.run_command(["analyze", os.path.join(self.temp_dir, "nope.txt")])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Invalid path", result.output)

    def test_conflicting_stopword_sources(self):
        stopwords = os.path.join(self.temp_dir, "stop.txt")
        with open(stopwords, "w", encoding="utf-8") as f:
            f.write("gato\n")
        result = self.run_command(
            ["analyze", "--stopwords-file", stopwords, "--nltk-stopwords", "portuguese"],
            input=SCENARIO
        )
        self.assertEqual(result.exit_code, 1)
        self.assertIn("not both", result.output)


class TreeCommandTestCase(CliTestCase):

    def test_json_tree(self):
        data = self.run_json(["tree", "--word", "o"], input=SCENARIO)
        tree = data["tree"]
        self.assertEqual(tree["count"], 3)
        self.assertEqual([c["word"] for c in tree["children"]], ["gato", "cão"])
        self.assertEqual(data["summary"]["sub_contexts"], 2)
        self.assertNotIn("layout", data)

    def test_layout(self):
        data = self.run_json(
            ["tree", "--word", "o", "--layout", "--width", "800", "--height", "600", "--highlight", "gato"],
            input=SCENARIO
        )
        self.assertEqual((data["layout"]["x"], data["layout"]["y"]), (90, 300))
        self.assertEqual(len(data["links"]), 4)
        self.assertTrue(data["layout"]["children"][0]["highlighted"])

    def test_substring_and_tie_break(self):
        data = self.run_json(
            ["tree", "--word", "o", "--match", "substring", "--tie-break", "alphabetical"],
            input=SCENARIO
        )
        self.assertEqual(data["tree"]["count"], 7)
        self.assertEqual([c["word"] for c in data["tree"]["children"]][:2], ["corre", "gato"])

    def test_default_word_and_rich_output(self):
        result = self.run_command(["tree", self.txt_file, "--layout"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Exploring most frequent word", result.output)
        self.assertIn("gato", result.output)
        self.assertIn("Layout", result.output)

    def test_missing_word(self):
        result = self.run_command(["tree", "--word", "zebra"], input=SCENARIO)
        self.assertEqual(result.exit_code, 0)
        self.assertIn("No contexts found", result.output)

    def test_bad_viewport(self):
        result = self.run_command(["tree", "--word", "o", "--layout", "--width", "0"], input=SCENARIO)
        self.assertEqual(result.exit_code, 1)


class WordsCommandTestCase(CliTestCase):

    def test_suggestions(self):
        data = self.run_json(["words", "--sample"])
        self.assertEqual(data["words"][0], "dados")
        self.assertLessEqual(len(data["words"]), 15)

    def test_rich_output(self):
        result = self.run_command(["words", self.txt_file])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("gato", result.output)


if __name__ == "__main__":
    unittest.main()
