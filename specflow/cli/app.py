from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

from specflow.config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config, parse_today
from specflow.logging.init import enable_debug, log_summary, setup_logging
from specflow.models.validation_issue import ValidationIssue
from specflow.services.orchestrator import compile_file, compile_journeys
from specflow.services.summary import render_summary_line

"""CLI entrypoint.

Usage: specflow-compile <journeys.csv> [--root DIR] [--config PATH]
       [--today YYYY-MM-DD] [--check] [--debug]

Flow:
- Load .env (overrides process environment)
- Load config (optional YAML, env overrides)
- Parse, validate, group, render and write
- Print SUMMARY line and one line per written artifact

Exit codes: 0 success (warnings included), 1 any fatal error. Nothing is
written when validation fails.
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1

STDIN_MARKER = "-"


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env using python-dotenv.

    override=True lets .env values win over variables already in the process.
    """
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="specflow-compile",
        description="Compile a journey CSV into YAML journey contracts and Playwright stubs",
    )
    p.add_argument("csv_file", help="Journey table (CSV, UTF-8); '-' reads stdin")
    p.add_argument("--root", default=".", help="Project root for generated files (default: cwd)")
    p.add_argument("--config", default=None, help="YAML config (default: config/specflow.yml if present)")
    p.add_argument("--today", default=None, help="Pin the last_verified date (YYYY-MM-DD)")
    p.add_argument("--check", action="store_true", help="Validate and report journeys without writing")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # Only read sys.argv when argv is None; an explicit [] must stay empty.
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    if args.debug:
        enable_debug(logger)
        logger.debug("debug mode enabled")

    _load_env_file(Path(".env"), override=True)

    root = Path(args.root)
    try:
        if args.config is not None:
            cfg = load_config(Path(args.config), required=True)
        else:
            cfg = load_config(root / DEFAULT_CONFIG_PATH)
        if args.today is not None:
            cfg = replace(cfg, today=parse_today(args.today))
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if not root.is_dir():
        logger.error(f"root directory not found: {root}")
        return EXIT_FATAL

    write = not args.check
    try:
        if args.csv_file == STDIN_MARKER:
            result = compile_journeys(sys.stdin.read(), root=root, config=cfg, write=write)
        else:
            csv_path = Path(args.csv_file)
            logger.debug(f"reading journeys from: {csv_path.resolve()}")
            result = compile_file(csv_path, root=root, config=cfg, write=write)
    except ValidationIssue as e:
        logger.error(f"{e.error_type}: {e}")
        return EXIT_FATAL
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"io: {e}")
        return EXIT_FATAL

    summary_line = render_summary_line(result)
    # log_summary adds the "SUMMARY " prefix itself
    log_summary(summary_line.removeprefix("SUMMARY "))

    if args.check:
        for journey in result.journeys.values():
            logger.info(
                f"journey {journey.journey_id} steps={len(journey.steps)} "
                f"criticality={journey.criticality} owner={journey.owner}"
            )
    for path in result.written:
        logger.info(f"wrote: {path}")

    return EXIT_SUCCESS
