from prometheus_client import CollectorRegistry, Counter, Gauge, write_to_textfile
from pathlib import Path
from typing import Any, Mapping
import logging

REGISTRY = CollectorRegistry()

ANALYZER_LINES = Gauge("analyzer_lines_read", "Lines read from the last document", registry=REGISTRY)
ANALYZER_TOKENS = Gauge("analyzer_tokens", "Tokens produced from the last document", registry=REGISTRY)
ANALYZER_NODES = Gauge("analyzer_tree_nodes", "Nodes in the last parsed tree", registry=REGISTRY)
ANALYZER_DEPTH = Gauge(
    "analyzer_deepest_text_depth", "Depth of the deepest text node, 0 if none", registry=REGISTRY
)
ANALYZER_DURATION = Gauge(
    "analyzer_run_duration_seconds", "Wall time of the last analysis", registry=REGISTRY
)
ANALYZER_LAST_SUCCESS = Gauge(
    "analyzer_last_success_timestamp_seconds", "Unix time of the last successful run", registry=REGISTRY
)
ANALYZER_FAILURES = Counter(
    "analyzer_failures", "Failed analyses by error kind", ["kind"], registry=REGISTRY
)


def export_metrics(config: Mapping[str, Any]) -> None:
    target = config.get("metrics", {}).get("textfile")
    if not target:
        return

    path = Path(target)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        write_to_textfile(str(path), REGISTRY)
    except OSError as e:
        logging.getLogger(__name__).warning(f"Could not write metrics to {path}: {e}")
    else:
        logging.getLogger(__name__).debug(f"Metrics written to {path}")
