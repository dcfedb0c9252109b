"""
CLI entrypoint for inspecting the tag table.

This script performs the following steps:
- configures logging
- loads configs/tag_i18n.yaml when present (defaults otherwise)
- runs one of: normalize, translate, list
"""

import argparse
import logging
from pathlib import Path

from application import configure, get_all_tags, normalize_tag, translate_tag
from infrastructure.config import load_tag_i18n_config
from infrastructure.constants import CONFIG_FILE
from infrastructure.observability import configure_logging

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Resolve and translate tags")
    p.add_argument(
        "--config",
        type=str,
        default=str(CONFIG_FILE),
        help="Path to tag_i18n.yaml (default: configs/tag_i18n.yaml; skipped if missing)",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )
    sub = p.add_subparsers(dest="command", required=True)

    p_norm = sub.add_parser("normalize", help="Print the canonical key for each tag")
    p_norm.add_argument("tags", nargs="+")

    p_tr = sub.add_parser("translate", help="Print the display label for each tag")
    p_tr.add_argument("tags", nargs="+")
    p_tr.add_argument("--lang", default="en", choices=["en", "zh"])

    p_list = sub.add_parser("list", help="Print every canonical key and its label")
    p_list.add_argument("--lang", default="en", choices=["en", "zh"])

    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(console_level=getattr(logging, args.console_level))

    config_path = Path(args.config)
    if config_path.exists():
        configure(load_tag_i18n_config(config_path))
    else:
        logger.info("No config at %s; using defaults", config_path)

    if args.command == "normalize":
        for tag in args.tags:
            print(normalize_tag(tag))
    elif args.command == "translate":
        for tag in args.tags:
            print(translate_tag(tag, args.lang))
    elif args.command == "list":
        for item in get_all_tags(args.lang):
            print(f"{item.key}\t{item.label}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
