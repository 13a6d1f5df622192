"""
CLI entrypoint for browsing the OASF skill/domain taxonomies.

This script performs the following steps:
- loads an optional .env and configs/browser.yaml
- loads the skill and domain taxonomy YAML files
- opens a browsing session on the requested taxonomy type
- applies expand/collapse actions and the search query
- optionally selects a category
- logs the summary counters and the visible tree
"""

import argparse
import logging
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from application import TaxonomyBrowser, log_browser_view
from domain.errors import NotFoundError
from domain.schemas import TaxonomyCategory, TaxonomyType
from infrastructure.config import load_browser_config, load_taxonomy_dataset
from infrastructure.constants import BROWSER_FILE
from infrastructure.io import ensure_exists
from infrastructure.observability import configure_logging, make_session_tag, set_log_context

logger = logging.getLogger(__name__)


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Browse the OASF skill/domain taxonomy")
    p.add_argument(
        "--config",
        type=str,
        default=str(BROWSER_FILE),
        help="Path to browser.yaml (default: configs/browser.yaml)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to optional .env file (default: .env)",
    )
    p.add_argument(
        "--type",
        type=str,
        default=None,
        choices=[t.value for t in TaxonomyType],
        help="Taxonomy type to browse (default: from config)",
    )
    p.add_argument("--query", type=str, default="", help="Filter categories by name")
    p.add_argument("--expand-all", action="store_true", help="Expand every category")
    p.add_argument(
        "--toggle",
        action="append",
        default=[],
        metavar="SLUG",
        help="Toggle expansion of a category (repeatable, applied in order)",
    )
    p.add_argument("--select", type=str, default=None, metavar="SLUG", help="Select a category")
    p.add_argument(
        "--console-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )
    p.add_argument("--log-file", type=str, default=None, help="Optional log file (overrides config)")
    return p.parse_args()


def _on_select(category: TaxonomyCategory, taxonomy_type: TaxonomyType) -> None:
    logger.info("Selected %s: %s (%s)", taxonomy_type.value, category.name, category.slug)


def main() -> None:
    args = _parse_args()

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    config_path = Path(args.config)
    ensure_exists(config_path, "browser.yaml")
    cfg = load_browser_config(config_path)

    log_file = Path(args.log_file) if args.log_file else cfg.log_file
    configure_logging(log_file=log_file, console_level=getattr(logging, args.console_level))

    session_id = f"{datetime.now().strftime('%Y%m%d_%H%M%S')}_{args.type or cfg.default_type.value}"
    set_log_context(session_id_full=session_id)
    logger.info("Starting session: session_id=%s (tag=%s)", session_id, make_session_tag(session_id))

    dataset = load_taxonomy_dataset(cfg)
    browser = TaxonomyBrowser.from_config(cfg, dataset, on_select=_on_select)
    if args.type:
        browser.switch_type(args.type)

    if args.expand_all:
        browser.expand_all()

    for slug in args.toggle:
        try:
            browser.toggle(slug)
        except NotFoundError as e:
            logger.warning("Ignoring toggle: %s", e)

    browser.set_query(args.query)

    if args.select:
        try:
            browser.select(args.select)
        except NotFoundError as e:
            logger.warning("Ignoring selection: %s", e)

    log_browser_view(browser)


if __name__ == "__main__":
    main()
