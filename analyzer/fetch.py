import requests
import logging
from pathlib import Path
from typing import Any, Mapping, Optional
from urllib.parse import urlparse, unquote
from analyzer.errors import RetrievalError

HTTP_SCHEMES = ("http", "https")
FILE_SCHEME = "file"


def fetch_http(url: str, timeout: Optional[float], user_agent: str) -> str:
    log = logging.getLogger(__name__)
    try:
        response = requests.get(url, headers={"User-Agent": user_agent}, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise RetrievalError(f"Could not fetch {url}: {e}") from e

    log.info(f"Fetched {url} ({response.status_code}, {len(response.content)} bytes)")
    return response.text


def fetch_file(url: str) -> str:
    parsed = urlparse(url)
    if parsed.netloc not in ("", "localhost"):
        raise RetrievalError(f"Remote file location not supported: {url}")

    path = Path(unquote(parsed.path))
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RetrievalError(f"Could not read {path}: {e}") from e


def fetch_lines(url: str, config: Optional[Mapping[str, Any]] = None) -> list[str]:
    settings = (config or {}).get("fetch", {})
    scheme = urlparse(url).scheme.lower()

    if scheme in HTTP_SCHEMES:
        body = fetch_http(
            url,
            timeout=settings.get("timeout"),
            user_agent=settings.get("user_agent", "html-depth-analyzer/1.0"),
        )
    elif scheme == FILE_SCHEME:
        body = fetch_file(url)
    elif not scheme:
        raise RetrievalError(f"Malformed URL, no scheme: {url!r}")
    else:
        raise RetrievalError(f"Unsupported URL scheme '{scheme}': {url!r}")

    lines = body.splitlines()
    logging.getLogger(__name__).debug(f"Read {len(lines)} lines from {url}")
    return lines
