import argparse
import logging
import sys
import yaml
from typing import Optional, Sequence
from analyzer.errors import AnalyzerError
from analyzer.load import load_config
from analyzer.logger import setup_logging
from analyzer.markup.tree import render_tree
from analyzer.pipeline import analyze_url


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html-depth-analyzer",
        description="Print the text found at the deepest nesting level of a document.",
    )
    parser.add_argument("url", help="location of the document (http, https or file URL)")
    parser.add_argument("--config", help="path to a YAML config file")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="fail when tokens remain after the outermost closing tag",
    )
    parser.add_argument("--tree", action="store_true", help="dump the parsed tree to stderr")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError) as e:
        print(f"Could not load configuration: {e}")
        return 1
    if args.strict:
        config["parser"]["strict_end"] = True
    setup_logging(config)
    log = logging.getLogger(__name__)

    try:
        analysis = analyze_url(args.url, config)
    except AnalyzerError as e:
        log.error(f"{type(e).__name__}: {e.detail}")
        print(e.summary)
        return 1

    if args.tree:
        print(render_tree(analysis.root), file=sys.stderr)
    if analysis.text is not None:
        print(analysis.text)
    return 0
