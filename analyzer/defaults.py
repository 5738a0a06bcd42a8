from typing import Any

CONFIG_SECTIONS: tuple[str, ...] = (
    "fetch",
    "parser",
    "logging",
    "metrics",
)

DEFAULT_CONFIG: dict[str, Any] = {
    "fetch": {
        "timeout": None,
        "user_agent": "html-depth-analyzer/1.0",
    },
    "parser": {
        "strict_end": False,
        "max_depth": None,
    },
    "logging": {
        "level": "WARNING",
        "file": None,
        "datetime_format": "%Y-%m-%d %H:%M:%S",
    },
    "metrics": {
        "textfile": None,
    },
}
