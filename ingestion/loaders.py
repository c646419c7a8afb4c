from __future__ import annotations

import hashlib
from pathlib import Path

import requests

from common.config import AppConfig
from common.logger import get_logger
from ingestion.cleaners import decode_body, extract_html_text, is_html
from ingestion.document_models import RawDoc

log = get_logger(__name__)


class DocumentFetchError(RuntimeError):
    """The document could not be retrieved; nothing downstream should run."""


def sha1_text(s: str) -> str:
    return hashlib.sha1(s.encode("utf-8")).hexdigest()


def _cache_path(cache_dir: Path, url: str) -> Path:
    return cache_dir / f"{sha1_text(url)}.text"


def is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def load_document(source: str, app: AppConfig | None = None) -> RawDoc:
    """Load a document from an http(s) URL or a local file path."""
    app = app or AppConfig()
    if is_url(source):
        return load_from_url(source, app)
    return load_from_path(Path(source))


def load_from_path(path: Path) -> RawDoc:
    try:
        txt = decode_body(path.read_bytes())
    except OSError as e:
        log.error("Failed to read %s: %s", path, e)
        raise DocumentFetchError(f"cannot read {path}: {e}") from e
    log.info("Loaded %d characters from %s", len(txt), path)
    return RawDoc(
        source_id=str(path.resolve()),
        text=txt,
        metadata={"source": path.name, "type": "text"},
        content_sha1=sha1_text(txt),
    )


def _fetch(url: str, app: AppConfig) -> requests.Response:
    resp = requests.get(
        url,
        timeout=app.timeout,
        headers={"User-Agent": app.user_agent},
    )
    resp.raise_for_status()
    return resp


def load_from_url(url: str, app: AppConfig) -> RawDoc:
    """Fetch a URL, optionally serving and storing the decoded text in the cache."""
    cache = _cache_path(app.cache_dir, url) if app.cache_dir else None
    if cache is not None and cache.exists():
        log.info("Cache hit for %s", url)
        text = cache.read_text(encoding="utf-8")
    else:
        try:
            resp = _fetch(url, app)
        except requests.RequestException as e:
            log.error("Failed to fetch %s: %s", url, e)
            raise DocumentFetchError(f"cannot fetch {url}: {e}") from e

        text = decode_body(resp.content)
        if app.extract_html and is_html(resp.headers.get("Content-Type", "")):
            text = extract_html_text(text)
        log.info("Fetched %d characters from %s", len(text), url)

        if cache is not None:
            cache.parent.mkdir(parents=True, exist_ok=True)
            cache.write_text(text, encoding="utf-8")

    return RawDoc(
        source_id=url,
        text=text,
        metadata={"source": url, "type": "web"},
        content_sha1=sha1_text(text),
    )
