from __future__ import annotations

import time
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional
from analyzer.errors import AnalyzerError
from analyzer.fetch import fetch_lines
from analyzer.markup.parser import DEFAULT_MAX_DEPTH, parse
from analyzer.markup.search import DeepestText, find_deepest_match
from analyzer.markup.tokens.tokenizer import tokenize
from analyzer.markup.tree import Node, count_nodes
from analyzer.metrics import (
    ANALYZER_DEPTH,
    ANALYZER_DURATION,
    ANALYZER_FAILURES,
    ANALYZER_LAST_SUCCESS,
    ANALYZER_LINES,
    ANALYZER_NODES,
    ANALYZER_TOKENS,
    export_metrics,
)


@dataclass(slots=True)
class Analysis:
    root: Node
    deepest: Optional[DeepestText]
    line_count: int
    token_count: int
    node_count: int

    @property
    def text(self) -> Optional[str]:
        return self.deepest.literal if self.deepest else None

    @property
    def depth(self) -> int:
        return self.deepest.depth if self.deepest else 0


def analyze_lines(
    lines: Iterable[str],
    strict: bool = False,
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
) -> Analysis:
    log = logging.getLogger(__name__)
    lines = list(lines)

    tokens = tokenize(lines)
    root = parse(tokens, strict=strict, max_depth=max_depth)
    deepest = find_deepest_match(root)

    analysis = Analysis(
        root=root,
        deepest=deepest,
        line_count=len(lines),
        token_count=len(tokens),
        node_count=count_nodes(root),
    )
    if deepest:
        log.info(f"Deepest text at depth {deepest.depth} of {analysis.node_count} nodes")
    else:
        log.info(f"No text node among {analysis.node_count} nodes")
    return analysis


def record_analysis(analysis: Analysis) -> None:
    ANALYZER_LINES.set(analysis.line_count)
    ANALYZER_TOKENS.set(analysis.token_count)
    ANALYZER_NODES.set(analysis.node_count)
    ANALYZER_DEPTH.set(analysis.depth)
    ANALYZER_LAST_SUCCESS.set_to_current_time()


def analyze_url(url: str, config: Mapping[str, Any]) -> Analysis:
    log = logging.getLogger(__name__)
    parser_config = config.get("parser", {})
    started = time.monotonic()
    log.info(f"Analyzing {url}")

    try:
        lines = fetch_lines(url, config)
        analysis = analyze_lines(
            lines,
            strict=bool(parser_config.get("strict_end", False)),
            max_depth=parser_config.get("max_depth", DEFAULT_MAX_DEPTH),
        )
    except AnalyzerError as e:
        ANALYZER_FAILURES.labels(kind=type(e).__name__).inc()
        raise
    else:
        record_analysis(analysis)
        return analysis
    finally:
        ANALYZER_DURATION.set(time.monotonic() - started)
        export_metrics(config)
