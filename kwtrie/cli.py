from __future__ import annotations

import argparse
import os

from .utils import logging as logutil
from .utils import paths as pathutil
from .utils.paths import load_yaml_once
from .utils.runinfo import new_run_id


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config-dir", default="configs", help="Directory containing YAML configs (default: ./configs)")
    p.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    p.add_argument("--log-to-file", action="store_true", help="Also write logs to file under artifacts.logs")
    p.add_argument("--keywords", help="Keyword file (overrides keywords.path in scan.yaml)")
    p.add_argument("--column", help="Keyword column name (overrides keywords.column)")
    p.add_argument("--delimiter", help="Keyword file delimiter (overrides keywords.delimiter)")


def _load_scan_cfg(args: argparse.Namespace) -> dict:
    os.environ["KWTRIE_CONFIG_DIR"] = args.config_dir
    pathutil.set_config_dir(args.config_dir)
    cfg_path = os.path.join(args.config_dir, "scan.yaml")
    try:
        cfg = load_yaml_once(cfg_path)
    except ValueError as e:
        raise SystemExit(f"Invalid config format: {cfg_path} ({e})")
    # Copy so CLI overrides never leak into the cached mapping
    cfg = {k: (dict(v) if isinstance(v, dict) else v) for k, v in cfg.items()}
    kw = cfg["keywords"] = cfg.get("keywords") or {}
    if not isinstance(kw, dict):
        raise SystemExit(f"Invalid config format: {cfg_path} (keywords must be a mapping)")
    if args.column:
        kw["column"] = args.column
    if args.delimiter:
        kw["delimiter"] = args.delimiter
    return cfg


def cmd_scan(args: argparse.Namespace) -> int:
    cfg = _load_scan_cfg(args)
    logger = logutil.setup_logging("scan", level=args.log_level, to_file=args.log_to_file)
    logger.info("Args: %s", vars(args))

    from .pipelines.scan_text import run as scan_run

    run_id = new_run_id()
    try:
        result = scan_run(
            cfg,
            keywords_path=args.keywords,
            text_path=args.text,
            output_path=args.output,
            show_progress=not args.no_progress,
            run_id=run_id,
        )
    except (ValueError, KeyError, FileNotFoundError) as e:
        logger.error("Scan failed: %s", e)
        raise SystemExit(str(e))
    logger.info(
        "Run %s: %d keywords, %d nodes, %d matches",
        result["run_id"], result["num_keywords"], result["num_nodes"], result["num_matches"],
    )
    return 0


def cmd_prefix(args: argparse.Namespace) -> int:
    cfg = _load_scan_cfg(args)
    logger = logutil.setup_logging("prefix", level=args.log_level, to_file=args.log_to_file)
    logger.info("Args: %s", vars(args))

    from .pipelines.scan_text import lookup
    from .sources.keywords import write_matches

    try:
        found = lookup(cfg, args.prefix, keywords_path=args.keywords)
    except (ValueError, KeyError, FileNotFoundError) as e:
        logger.error("Prefix lookup failed: %s", e)
        raise SystemExit(str(e))
    logger.info("%d keywords start with %r", len(found), args.prefix)
    write_matches(found)
    return 0


def cmd_contains(args: argparse.Namespace) -> int:
    cfg = _load_scan_cfg(args)
    logger = logutil.setup_logging("contains", level=args.log_level, to_file=args.log_to_file)
    logger.info("Args: %s", vars(args))

    from .pipelines.scan_text import contains

    try:
        present = contains(cfg, args.keyword, keywords_path=args.keywords)
    except (ValueError, KeyError, FileNotFoundError) as e:
        logger.error("Lookup failed: %s", e)
        raise SystemExit(str(e))
    logger.info("Keyword %r %s", args.keyword, "present" if present else "absent")
    return 0 if present else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kwtrie", description="Trie-based keyword scanner")
    sub = parser.add_subparsers(dest="command", required=True)

    p1 = sub.add_parser("scan", help="Scan a text file for keywords and print each match on its own line")
    _add_common_args(p1)
    p1.add_argument("--text", help="Text file to scan (overrides text.path)")
    p1.add_argument("--output", help="Write matches to this file instead of stdout (overrides output.path)")
    p1.add_argument("--no-progress", action="store_true", help="Hide the trie build progress bar")
    p1.set_defaults(func=cmd_scan)

    p2 = sub.add_parser("prefix", help="List keywords starting with a prefix")
    _add_common_args(p2)
    p2.add_argument("prefix", help="Prefix to look up (empty string lists every keyword)")
    p2.set_defaults(func=cmd_prefix)

    p3 = sub.add_parser("contains", help="Exit 0 if the keyword is in the list, 1 otherwise")
    _add_common_args(p3)
    p3.add_argument("keyword", help="Exact keyword to look up")
    p3.set_defaults(func=cmd_contains)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
