"""Application entrypoint — start the API server or run one-off commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import structlog
import uvicorn
from pydantic import ValidationError

from fatigue_sense.config import get_settings
from fatigue_sense.errors import InsufficientDataError
from fatigue_sense.ingest import load_export
from fatigue_sense.logger import setup_logging
from fatigue_sense.scoring import check_composite_input, compute_fatigue_score, interpret_score

logger = structlog.get_logger(__name__)


def _analyze(path: Path) -> int:
    """Run the upload-and-analyze path on a mobile export; return exit code."""
    try:
        export = load_export(path)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        logger.error("cli.bad_export", path=str(path), error=str(exc))
        print(f"Cannot read {path}: {exc}", file=sys.stderr)
        return 1

    try:
        check_composite_input(export.acc, get_settings().min_analyze_samples)
    except InsufficientDataError as exc:
        print(f"{exc}: {exc.received} samples, need {exc.required}.", file=sys.stderr)
        return 1

    result = compute_fatigue_score(export.acc)
    payload = result.model_dump()
    payload["interpretation"] = interpret_score(result.fatigue_score)
    payload["gyroSamples"] = len(export.gyro)
    print(json.dumps(payload, indent=2))
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="fatigue-sense",
        description="Fatigue scoring from motor-task IMU recordings.",
    )
    sub = parser.add_subparsers(dest="command")

    # ── serve ─────────────────────────────────────────────────
    serve_parser = sub.add_parser("serve", help="Start the API server.")
    serve_parser.add_argument("--host", default=None)
    serve_parser.add_argument("--port", type=int, default=None)
    serve_parser.add_argument("--reload", action="store_true")

    # ── analyze ───────────────────────────────────────────────
    analyze_parser = sub.add_parser("analyze", help="Score an exported session JSON file.")
    analyze_parser.add_argument("file", type=Path)

    args = parser.parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level)

    if args.command == "serve":
        uvicorn.run(
            "fatigue_sense.api.server:app",
            host=args.host or settings.api_host,
            port=args.port or settings.api_port,
            reload=args.reload,
        )
    elif args.command == "analyze":
        sys.exit(_analyze(args.file))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
