from __future__ import annotations

import argparse
import os
import sys
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from ..logging.init import log_summary, setup_logging
from ..models.region import InvalidRecordError
from ..sample import SAMPLE_CITIES, SAMPLE_DROP_LAST
from ..services.pipeline import ReportConfig, ReportError, generate_report
from ..services.render import RenderOptions, print_table
from ..services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env, then the YAML config (--config > REGION_TABLE_CONFIG > config/report.yml)
- Apply command-line overrides
- Read the input CSV (or the embedded sample)
- Write the table to stdout in one write, SUMMARY line to the log
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1

CONFIG_ENV_VAR = "REGION_TABLE_CONFIG"


def _load_env_file(path: Path, override: bool = False) -> None:
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render city statistics sorted by relative density")
    p.add_argument("--config", type=Path, help="YAML config path (default: config/report.yml)")
    p.add_argument("--input", type=Path, help="CSV file to read (default: embedded sample)")
    p.add_argument("--separator", help="Field separator override")
    p.add_argument("--drop-last", type=int, help="Drop N trailing rows before sorting")
    p.add_argument(
        "--no-relative-density", action="store_true", help="Omit the relative density column"
    )
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> ReportConfig | None:
    """Return the file config, or None when no file was requested or found.

    Raises:
        ConfigError: an explicitly requested file is missing or invalid
    """
    explicit = args.config or (Path(os.environ[CONFIG_ENV_VAR]) if os.getenv(CONFIG_ENV_VAR) else None)
    if explicit is not None:
        return load_config(explicit)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return None


def _apply_overrides(cfg: ReportConfig, args: argparse.Namespace) -> ReportConfig:
    if args.separator:
        cfg = replace(cfg, csv=replace(cfg.csv, separator=args.separator))
    if args.no_relative_density:
        cfg = replace(cfg, render=RenderOptions(relative_density=False))
    if args.drop_last is not None:
        cfg = replace(cfg, drop_last=args.drop_last)
    return cfg


def main(argv: list[str] | None = None) -> int:
    # None のときのみ sys.argv を読む (テストで [] を渡すケース)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    logger = setup_logging(debug=args.debug)
    logger.debug("debug mode enabled")

    _load_env_file(Path(".env"))

    try:
        file_cfg = _resolve_config(args)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if args.input is not None:
        if not args.input.exists():
            logger.error(f"input not found: {args.input}")
            return EXIT_FATAL
        cfg = file_cfg or ReportConfig()
        # 末尾の改行 1 つは空行レコードになるため除去
        text = args.input.read_text(encoding="utf-8").removesuffix(cfg.csv.eol)
        logger.info(f"Reading regions from: {args.input}")
    else:
        # サンプルは常に末尾 1 行を除外 (--drop-last で上書き可)
        if file_cfg is not None and file_cfg.drop_last != SAMPLE_DROP_LAST and args.drop_last is None:
            logger.info(
                f"embedded sample uses drop_last={SAMPLE_DROP_LAST}; "
                f"config drop_last={file_cfg.drop_last} applies to --input files only"
            )
        cfg = replace(file_cfg or ReportConfig(), drop_last=SAMPLE_DROP_LAST)
        text = SAMPLE_CITIES
        logger.info("Reading regions from embedded sample")

    cfg = _apply_overrides(cfg, args)

    try:
        result = generate_report(text, cfg)
    except (ReportError, InvalidRecordError) as e:
        logger.error(f"report: {e}")
        return EXIT_FATAL

    print_table(result.collection, cfg.render)
    log_summary(render_summary_line(result)[len("SUMMARY "):])
    return EXIT_SUCCESS
