#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# File: cli.py
# Project: wordtree
# Author: Wadih Khairallah
# Created: 2025-06-03
# Modified: 2025-06-09 19:05:44
#
# Command line interface for the wordtree engine

import sys
import json as j
import logging
import click
import pytz

from datetime import datetime
from pathlib import Path
from typing import Optional, Dict, List, Any, Tuple

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree
from rich import box
from rich.pretty import Pretty
from rich.markup import escape

from wordtree.__version__ import __version__
from wordtree.analysis import analyze as analyze_text
from wordtree.config import build_config, load_config
from wordtree.context import (
    MATCH_MODES,
    TIE_BREAKS,
    build_context_tree,
    iter_nodes,
    tree_summary,
)
from wordtree.layout import layout_tree, tree_links
from wordtree.lexicons import (
    SAMPLE_TEXT,
    load_sentiment_lexicon,
    load_stopwords,
    nltk_stopwords,
)
from wordtree.preprocess import suggest_target_words

# Setup console
console = Console()
logger = logging.getLogger("wordtree")

# Constants
TIMESTAMP = datetime.now(pytz.UTC).isoformat()
SENTIMENT_STYLES = {"positive": "green", "negative": "red", "neutral": "white"}


def setup_logging(verbose: bool = False) -> None:
    """Route library logging through rich on stderr"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)]
    )
    logging.getLogger("wordtree").setLevel(logging.DEBUG if verbose else logging.WARNING)


def fail(message: str) -> None:
    """Report an error and exit non-zero"""
    console.print(f"[red]Error:[/] {escape(message)}")
    sys.exit(1)


# Utility functions
def handle_output(
    data: Any,
    source: str,
    save_path: Optional[str] = None,
    json_output: bool = False,
    raw_output: bool = False
):
    """Handle output in either JSON, raw text, or rich formatted mode"""
    if json_output:
        if isinstance(data, dict):
            data = dict(data)
            data["timestamp"] = TIMESTAMP
            data["source"] = source

        output = j.dumps(data, indent=4, ensure_ascii=False)

        if save_path:
            Path(save_path).write_text(output, encoding="utf-8")
            console.print(f"[green]Output saved to:[/] {save_path}")
            return output

        print(output)
        return output

    if raw_output:
        if not isinstance(data, str):
            output = j.dumps(data, indent=4, ensure_ascii=False)
        else:
            output = data

        print(output)
        return output

    if save_path:
        if not isinstance(data, str):
            data = j.dumps(data, indent=4, ensure_ascii=False)

        Path(save_path).write_text(data, encoding="utf-8")
        console.print(f"[green]Output saved to:[/] {save_path}")
        return data

    console.print(Panel(
        Pretty(data) if not isinstance(data, str) else data,
        title=f"Source: {source}",
        border_style="green",
        expand=True
    ))
    return data


def read_source(
    source: Optional[str],
    sample: bool = False
) -> Tuple[str, str]:
    """
    Resolve the text to work on.

    Returns:
        Tuple[str, str]: (text, label describing where it came from)
    """
    if sample:
        return SAMPLE_TEXT, "sample"

    if source and source != "-":
        path = Path(source).expanduser()
        if not path.is_file():
            fail(f"Invalid path '{source}'")
        return path.read_text(encoding="utf-8"), str(path.resolve())

    if sys.stdin.isatty():
        return "", "stdin"
    return sys.stdin.read(), "stdin"


def display_word_table(
    words: List[Dict[str, Any]],
    title: str,
    show_sentiment: bool = True
) -> None:
    """Pretty-print a ranked word list"""
    table = Table(title=title, box=box.ROUNDED, expand=True)
    table.add_column("Rank", justify="right", style="cyan", no_wrap=True)
    table.add_column("Word", style="bold")
    table.add_column("Count", justify="right")
    if show_sentiment:
        table.add_column("Sentiment")

    for entry in words:
        row = [str(entry["rank"]), escape(entry["word"]), str(entry["count"])]
        if show_sentiment:
            sentiment = entry.get("sentiment")
            if sentiment:
                style = SENTIMENT_STYLES.get(sentiment["category"], "white")
                label = sentiment["category"]
                if sentiment["score"]:
                    label += f" ({sentiment['score']})"
                row.append(f"[{style}]{label}")
            else:
                row.append("")
        table.add_row(*row)

    console.print(table)


def display_stats(result: Dict[str, Any], show_sentiment: bool) -> None:
    """Pretty-print filtering and sentiment statistics"""
    stats = result["filtering_stats"]
    table = Table(title="Filtering", box=box.ROUNDED, show_header=False)
    table.add_column(style="cyan")
    table.add_column(justify="right", style="green")
    table.add_row("Total words", str(stats["total_words"]))
    table.add_row("Unique words", str(stats["unique_words"]))
    table.add_row("Distinct kept", str(stats["filtered_words"]))
    table.add_row("Distinct stopwords", str(stats["stop_words_removed"]))
    table.add_row("Final words", str(stats["final_words"]))
    table.add_row("Filtering efficiency", f"{stats['filtering_efficiency']}%")
    console.print(table)

    if show_sentiment:
        sentiment = result["sentiment_stats"]
        dist = sentiment["distribution"]
        style = SENTIMENT_STYLES.get(sentiment["overall"], "white")
        console.print(Panel(
            f"Overall: [{style}]{sentiment['overall']}[/]\n"
            f"Score: {sentiment['score']}  Weighted: {sentiment['weighted_score']}\n"
            f"[green]Positive {dist['positive']}%[/]  "
            f"[white]Neutral {dist['neutral']}%[/]  "
            f"[red]Negative {dist['negative']}%[/]",
            title="Sentiment",
            border_style="blue"
        ))


def display_tree(tree: Dict[str, Any]) -> None:
    """Render a context tree with rich"""
    rendered = Tree(f"[bold magenta]{escape(tree['word'])}[/] ({tree['count']})")
    for child in tree["children"]:
        branch = rendered.add(f"[bold cyan]{escape(child['word'])}[/] ({child['count']})")
        for grandchild in child["children"]:
            branch.add(f"[green]{escape(grandchild['word'])}[/] ({grandchild['count']})")

    summary = tree_summary(tree)
    console.print(Panel(
        rendered,
        title=f"Context tree: {escape(summary['word'])}",
        subtitle=(
            f"{summary['occurrences']} occurrences, "
            f"{summary['direct_contexts']} direct, {summary['sub_contexts']} sub contexts"
        ),
        border_style="green"
    ))


def display_layout(layout: Dict[str, Any], links: List[Dict[str, Any]]) -> None:
    """Pretty-print laid out node positions"""
    table = Table(title="Layout", box=box.ROUNDED, expand=True)
    for column in ("Word", "Depth", "X", "Y", "Radius", "Font", "Color"):
        table.add_column(column)

    for node in iter_nodes(layout):
        table.add_row(
            escape(node["word"]), str(node["depth"]), str(node["x"]), str(node["y"]),
            str(node["radius"]), str(node["font_size"]), f"[{node['color']}]{node['color']}"
        )

    console.print(table)
    console.print(f"[cyan]Links:[/] {len(links)}")


# Main CLI group
@click.group()
@click.option('-v', '--verbose', is_flag=True, help='Enable debug logging')
@click.version_option(version=__version__)
def cli(verbose: bool):
    """
    wordtree: word statistics and context trees for free text

    Rank words, score their sentiment and explore what follows a word.
    """
    setup_logging(verbose)


# Analyze command
@cli.command()
@click.argument('source', required=False)
@click.option('--sample', is_flag=True, help='Use the bundled sample text')
@click.option('--config', 'config_path', help='JSON config file')
@click.option('--max-words', type=int, help='Maximum number of ranked words')
@click.option('--min-length', type=int, help='Minimum word length')
@click.option('--no-stopwords', is_flag=True, help='Disable the base stopword list')
@click.option('--stopword', multiple=True, help='Extra stopword (repeatable)')
@click.option('--stopwords-file', help='Replace the base stopword list with a file')
@click.option('--nltk-stopwords', 'nltk_language', help='Use NLTK stopwords for a language')
@click.option('--lexicon-file', help='JSON sentiment lexicon')
@click.option('--no-sentiment', is_flag=True, help='Disable sentiment scoring')
@click.option('--show-filtered', is_flag=True, help='Also list removed stopwords')
@click.option('--output', help='Save output to a file')
@click.option('--json', is_flag=True, help='Output results as JSON')
@click.option('--raw', is_flag=True, help='Output plain text without formatting')
def analyze(
    source: Optional[str],
    sample: bool,
    config_path: Optional[str],
    max_words: Optional[int],
    min_length: Optional[int],
    no_stopwords: bool,
    stopword: Tuple[str, ...],
    stopwords_file: Optional[str],
    nltk_language: Optional[str],
    lexicon_file: Optional[str],
    no_sentiment: bool,
    show_filtered: bool,
    output: Optional[str],
    json: bool,
    raw: bool
):
    """Rank words and report filtering and sentiment statistics"""
    if stopwords_file and nltk_language:
        fail("Use either --stopwords-file or --nltk-stopwords, not both")

    text, label = read_source(source, sample)
    if not text.strip():
        console.print("[yellow]No input text provided.[/yellow]")
        return

    try:
        config = load_config(config_path) if config_path else build_config()

        overrides: Dict[str, Any] = {}
        if max_words is not None:
            overrides["max_words"] = max_words
        if min_length is not None:
            overrides["min_word_length"] = min_length
        if no_stopwords:
            overrides["enable_stopword_filter"] = False
        if stopword:
            overrides["custom_stopwords"] = tuple(config["custom_stopwords"]) + stopword
        if stopwords_file:
            overrides["stopword_lexicon"] = load_stopwords(stopwords_file)
        if nltk_language:
            overrides["stopword_lexicon"] = nltk_stopwords(nltk_language)
        if lexicon_file:
            overrides["sentiment_lexicon"] = load_sentiment_lexicon(lexicon_file)
        if no_sentiment:
            overrides["enable_sentiment"] = False

        result = analyze_text(text, config, **overrides)
    except (ValueError, OSError) as e:
        logger.debug("Analysis failed", exc_info=True)
        fail(str(e))

    if json or raw or output:
        if not show_filtered:
            result = {key: value for key, value in result.items() if key != "filtered_words"}
        handle_output(result, label, output, json, raw)
        return

    show_sentiment = not no_sentiment
    if not result["ranked_words"]:
        console.print(
            "[yellow]No meaningful words left after filtering. "
            "Adjust the stopword settings or add more text.[/yellow]"
        )
    else:
        display_word_table(result["ranked_words"], "Ranked words", show_sentiment)
    if show_filtered and result["filtered_words"]:
        display_word_table(result["filtered_words"], "Removed stopwords", show_sentiment)
    display_stats(result, show_sentiment)


# Tree command
@cli.command()
@click.argument('source', required=False)
@click.option('--word', help='Target word; defaults to the most frequent candidate')
@click.option('--sample', is_flag=True, help='Use the bundled sample text')
@click.option('--match', type=click.Choice(MATCH_MODES), default="exact", show_default=True,
              help='How tokens are matched against the target word')
@click.option('--tie-break', type=click.Choice(TIE_BREAKS), default="first_seen", show_default=True,
              help='Order of equally frequent branches')
@click.option('--layout', 'with_layout', is_flag=True, help='Include node coordinates and links')
@click.option('--width', type=float, default=800, show_default=True, help='Viewport width')
@click.option('--height', type=float, default=600, show_default=True, help='Viewport height')
@click.option('--highlight', help='Emphasize nodes containing this term')
@click.option('--output', help='Save output to a file')
@click.option('--json', is_flag=True, help='Output results as JSON')
@click.option('--raw', is_flag=True, help='Output plain text without formatting')
def tree(
    source: Optional[str],
    word: Optional[str],
    sample: bool,
    match: str,
    tie_break: str,
    with_layout: bool,
    width: float,
    height: float,
    highlight: Optional[str],
    output: Optional[str],
    json: bool,
    raw: bool
):
    """Build the context tree of the words that follow a target word"""
    text, label = read_source(source, sample)
    if not text.strip():
        console.print("[yellow]No input text provided.[/yellow]")
        return

    if not word:
        candidates = suggest_target_words(text)
        if not candidates:
            console.print("[yellow]No frequent words found to explore.[/yellow]")
            return
        word = candidates[0]
        if not (json or raw):
            console.print(f"[cyan]Exploring most frequent word:[/] {escape(word)}")

    context_tree = build_context_tree(text, word, match=match, tie_break=tie_break)
    if context_tree is None:
        console.print(f"[yellow]No contexts found for '{escape(word)}'.[/yellow]")
        return

    result: Dict[str, Any] = {"tree": context_tree, "summary": tree_summary(context_tree)}
    if with_layout:
        try:
            layout = layout_tree(context_tree, width, height, highlight=highlight)
        except ValueError as e:
            fail(str(e))
        result["layout"] = layout
        result["links"] = tree_links(layout)

    if json or raw or output:
        handle_output(result, label, output, json, raw)
        return

    display_tree(context_tree)
    if with_layout:
        display_layout(result["layout"], result["links"])


# Words command
@cli.command()
@click.argument('source', required=False)
@click.option('--sample', is_flag=True, help='Use the bundled sample text')
@click.option('--limit', type=int, default=15, show_default=True, help='Maximum suggestions')
@click.option('--min-length', type=int, default=3, show_default=True, help='Minimum word length')
@click.option('--output', help='Save output to a file')
@click.option('--json', is_flag=True, help='Output results as JSON')
@click.option('--raw', is_flag=True, help='Output plain text without formatting')
def words(
    source: Optional[str],
    sample: bool,
    limit: int,
    min_length: int,
    output: Optional[str],
    json: bool,
    raw: bool
):
    """Suggest target words worth exploring as context trees"""
    text, label = read_source(source, sample)
    candidates = suggest_target_words(text, limit=limit, min_length=min_length)

    if json or raw or output:
        handle_output({"words": candidates}, label, output, json, raw)
        return

    if not candidates:
        console.print("[yellow]No frequent words found.[/yellow]")
        return
    console.print(Panel(", ".join(candidates), title="Suggested words", border_style="green"))


def main():
    try:
        cli()
    except Exception as e:
        console.print(f"[bold red]Error:[/] {str(e)}")
        if '-v' in sys.argv or '--verbose' in sys.argv:
            import traceback
            console.print(traceback.format_exc())
        sys.exit(1)


if __name__ == "__main__":
    main()
