"""
CLI entrypoint for registering declared content types and taxonomies.

This script performs the following steps:
- loads .env, configs/registrations.yaml
- creates a per-run output folder under outputs/
- builds every declared content type and taxonomy (identifier validation included)
- hands the finished records to the selected registration host
- writes the manifest (manifest host), the resolved config and a run summary
"""

import argparse
import logging
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from application import register_declarations
from application.constants import (
    CONFIG_SNAPSHOT_FILENAME,
    LOG_FILENAME,
    MANIFEST_FILENAME,
    OUTPUT_ROOT,
    SUMMARY_FILENAME,
)
from domain.host import set_default_host
from infrastructure.config import HostKind, load_run_config
from infrastructure.constants import DECLARATIONS_FILE
from infrastructure.hosts import ManifestHost, make_host
from infrastructure.io import ensure_exists, write_json
from infrastructure.observability import configure_logging, make_run_tag, set_log_context

logger = logging.getLogger(__name__)


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Register content types and taxonomies from a declarations file")
    p.add_argument(
        "--declarations",
        type=str,
        default=str(DECLARATIONS_FILE),
        help="Path to registrations.yaml (default: configs/registrations.yaml)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file (default: .env; skipped if missing)",
    )
    p.add_argument(
        "--host",
        type=str,
        default=None,
        choices=[k.value for k in HostKind],
        help="Override the registration host declared in the file.",
    )
    p.add_argument(
        "--output-root",
        type=str,
        default=str(OUTPUT_ROOT),
        help="Directory receiving per-run output folders (default: outputs)",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )
    p.add_argument(
        "--file-level",
        type=str,
        default="DEBUG",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="File log level",
    )
    return p.parse_args()


def main() -> None:
    args = _parse_args()

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    declarations_path = Path(args.declarations)
    ensure_exists(declarations_path, "registrations.yaml")

    cfg = load_run_config(declarations_path)
    if args.host is not None:
        cfg.host = HostKind(args.host)

    # ---- Per-run output folder ----
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_id = f"{ts}_{cfg.host.value}_ct{len(cfg.content_types)}_tax{len(cfg.taxonomies)}"

    run_dir = Path(args.output_root) / run_id
    run_dir.mkdir(parents=True, exist_ok=True)

    log_path = run_dir / LOG_FILENAME
    configure_logging(
        log_file=log_path,
        console_level=getattr(logging, args.console_level),
        file_level=getattr(logging, args.file_level),
    )
    set_log_context(run_id_full=run_id)

    logger.info("Starting run: run_id=%s (run_tag=%s)", run_id, make_run_tag(run_id))
    logger.info("Run output directory: %s", run_dir)

    write_json(run_dir / CONFIG_SNAPSHOT_FILENAME, cfg.model_dump(mode="json"))

    host = make_host(cfg)
    set_default_host(host)

    summary = register_declarations(cfg, host)
    write_json(run_dir / SUMMARY_FILENAME, summary.model_dump())

    if isinstance(host, ManifestHost):
        host.write(run_dir / MANIFEST_FILENAME)

    logger.info("Done: %d registration(s). Detailed log: %s", summary.total, log_path)


if __name__ == "__main__":
    main()
