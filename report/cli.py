from __future__ import annotations

import argparse
from pathlib import Path
from typing import TypeVar

import orjson
from pydantic import BaseModel

from common.config import load_yaml_config
from common.logger import get_logger
from ingestion.loaders import DocumentFetchError
from report.composer import perform

log = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print word counts, top words and a histogram for a text document."
    )
    parser.add_argument("source", type=str, help="http(s) URL or local file path")
    parser.add_argument(
        "--config", type=str, default=None, help="YAML config (default: config/config.yaml)"
    )
    parser.add_argument("--min_length", type=int, default=None)
    parser.add_argument("--top", type=int, default=None, help="Rows in the top words table")
    parser.add_argument("--histogram", type=int, default=None, help="Words in the histogram")
    parser.add_argument("--marker", type=str, default=None, help="Histogram bar character")
    parser.add_argument("--timeout", type=int, default=None)
    parser.add_argument("--cache_dir", type=str, default=None)
    parser.add_argument(
        "--extract_html",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Strip markup when the server answers with HTML",
    )
    parser.add_argument("--json", type=str, default="", help="Also write the report as JSON")
    return parser


def _override(model: M, overrides: dict) -> M:
    """Copy a config section with the non-None overrides applied and re-validated."""
    values = {k: v for k, v in overrides.items() if v is not None}
    return type(model).model_validate({**model.model_dump(), **values})


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    try:
        cfg = load_yaml_config(Path(args.config) if args.config else None)
    except FileNotFoundError as e:
        log.error("Config file does not exist: %s", e.filename)
        raise SystemExit(1)

    analysis_overrides = {
        "minimum_word_length": args.min_length,
        "top_words_count": args.top,
        "histogram_words_count": args.histogram,
        "histogram_marker_character": args.marker,
    }
    app_overrides = {
        "timeout": args.timeout,
        "cache_dir": args.cache_dir,
        "extract_html": args.extract_html,
    }
    analysis_cfg = _override(cfg.analysis, analysis_overrides)
    app_cfg = _override(cfg.app, app_overrides)

    try:
        report = perform(args.source, config=analysis_cfg, app=app_cfg)
    except DocumentFetchError as e:
        log.error("%s", e)
        raise SystemExit(1)

    if args.json:
        out = Path(args.json)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_bytes(orjson.dumps(report.to_dict(), option=orjson.OPT_INDENT_2))
        log.info("Wrote report to %s", out)


if __name__ == "__main__":
    main()
