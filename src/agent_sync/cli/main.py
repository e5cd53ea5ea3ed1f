"""Main CLI entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path


def main() -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(prog="agent-sync", description="Sync marketplace AI agents into HubSpot")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Debug logging (CRM calls, retries)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # sync
    sync_parser = subparsers.add_parser("sync", help="Upsert feed agents into the CRM")
    sync_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report would create / would update without writing",
    )
    sync_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config file (token still comes from HUBSPOT_TOKEN)",
    )
    sync_parser.add_argument(
        "--source",
        default="http",
        choices=["http", "file"],
        help="Feed source: AGENTS_JSON_URL over HTTP, or a local file (--input)",
    )
    sync_parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Local feed JSON (required with --source file)",
    )
    sync_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the JSON result to file (default: stdout)",
    )

    # normalize
    normalize_parser = subparsers.add_parser("normalize", help="Preview canonical properties for a local feed")
    normalize_parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Path to feed JSON (array or {items: [...]})",
    )
    normalize_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write normalized JSON to file (default: stdout)",
    )

    # diag
    diag_parser = subparsers.add_parser("diag", help="Show which settings are configured")
    diag_parser.add_argument("--config", type=Path, default=None, help="YAML config file")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Serve /api/sync-agents and /api/diag")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "sync":
        _run_sync(args)
    elif args.command == "normalize":
        _run_normalize(args)
    elif args.command == "diag":
        _run_diag(args)
    elif args.command == "serve":
        _run_serve(args)
    else:
        parser.print_help()


def _load_config(config_path: Path | None):
    """Load config from YAML or the environment; bad config exits with a message."""
    from agent_sync.config import SyncConfig
    from agent_sync.errors import ConfigError

    try:
        if config_path is not None:
            return SyncConfig.from_yaml(config_path)
        return SyncConfig.from_env()
    except (ConfigError, OSError, ValueError) as e:
        raise SystemExit(f"Invalid config: {e}")


def _emit(payload, output: Path | None) -> None:
    text = json.dumps(payload, indent=2, default=str)
    if output:
        output.write_text(text, encoding="utf-8")
        print(f"Wrote results to {output}", file=sys.stderr)
    else:
        print(text)


def _run_sync(args: argparse.Namespace) -> None:
    """Run sync command."""
    from agent_sync.errors import ConfigError
    from agent_sync.pipeline import run_sync

    config = _load_config(args.config)
    if args.source == "file":
        if args.input is None:
            raise SystemExit("sync --source file requires --input")
        # the job resolves a path location to the file source
        config = config.model_copy(update={"feed_url": str(args.input)})

    try:
        config.require_sync_settings()
    except ConfigError as e:
        raise SystemExit(str(e))

    status_code, body = run_sync(config, dry_run=args.dry_run)
    _emit(body, args.output)
    if status_code != 200:
        raise SystemExit(1)


def _run_normalize(args: argparse.Namespace) -> None:
    """Run normalize command. No CRM access."""
    from agent_sync.errors import FeedFetchError
    from agent_sync.sources import SourceRegistry

    source = SourceRegistry.get("file", path=args.input)
    try:
        props = source.fetch_all()
    except FeedFetchError as e:
        raise SystemExit(str(e))
    _emit([p.to_crm_properties() for p in props], args.output)


def _run_diag(args: argparse.Namespace) -> None:
    """Run diag command."""
    config = _load_config(args.config)
    print(json.dumps(config.diagnostics(), indent=2))


def _run_serve(args: argparse.Namespace) -> None:
    """Run serve command."""
    import uvicorn

    from agent_sync.api import create_app

    uvicorn.run(create_app(), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
