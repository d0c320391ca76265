"""CLI for Nexus Reaper."""

import argparse
import sys
from pathlib import Path
from typing import Any

import structlog

from .config import ReaperConfig
from .exceptions import ReaperError
from .factory import Factory
from .models.scan_mode import ScanMode

VALUE_OPTIONS = frozenset(
    f"{dash}{name}"
    for dash in ("-", "--")
    for name in (
        "host",
        "repository",
        "path",
        "regexp",
        "before",
        "age",
    )
)
"""Options whose value may itself start with a dash, e.g. a pattern."""


def _attach_values(argv: list[str]) -> list[str]:
    # argparse takes "-regexp -SNAPSHOT" for two options; "-regexp=-SNAPSHOT"
    # is unambiguous.
    retval: list[str] = []
    pending = iter(argv)
    for arg in pending:
        if arg in VALUE_OPTIONS:
            value = next(pending, None)
            if value is not None:
                arg = f"{arg}={value}"
        retval.append(arg)
    return retval


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Long options may be given with one dash or two.  Options left unset
    are `None`, so that they do not override the config file.
    """
    parser = argparse.ArgumentParser(
        description="Report or reap old content from Nexus repositories.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-c",
        "--config-file",
        type=Path,
        help="reaper config file",
        default=None,
    )
    parser.add_argument(
        "-repo-list",
        "--repo-list",
        action="store_true",
        help="List all repositories",
        default=False,
    )
    parser.add_argument(
        "-list",
        "--list",
        action="store_true",
        help="Show content of repository",
        default=False,
    )
    parser.add_argument(
        "-delete",
        "--delete",
        action="store_true",
        help="Delete content",
        default=False,
    )
    parser.add_argument(
        "-dry-run",
        "--dry-run",
        action=argparse.BooleanOptionalAction,
        help="Dry run: do not delete any content (default: true)",
        default=None,
    )
    parser.add_argument(
        "-host",
        "--host",
        help="Nexus hosts (comma-separated list; default: localhost:8000)",
        default=None,
    )
    parser.add_argument(
        "-repository",
        "--repository",
        help="Nexus repositories (comma-separated list; default: jts-release)",
        default=None,
    )
    parser.add_argument(
        "-path",
        "--path",
        help="Paths within each repository (comma-separated list)",
        default=None,
    )
    parser.add_argument(
        "-regexp",
        "--regexp",
        help="Pattern to search for in resource URIs (default: .*)",
        default=None,
    )
    parser.add_argument(
        "-before",
        "--before",
        help=(
            "Act on content modified before this local time, as"
            " 'YYYY-MM-DD HH:MM:SS' or 'YYYY-MM-DD' (default: now)"
        ),
        default=None,
    )
    parser.add_argument(
        "--age",
        help="Act on content older than this duration, e.g. '30d'",
        default=None,
    )
    parser.add_argument(
        "-k",
        "--keep-going",
        action="store_true",
        help="Continue with the next listing when one fails",
        default=None,
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging",
        default=None,
    )
    if argv is None:
        argv = sys.argv[1:]
    return parser.parse_args(_attach_values(argv))


def _select_mode(args: argparse.Namespace) -> ScanMode | None:
    if args.repo_list:
        return ScanMode.REPOSITORIES
    if args.list:
        return ScanMode.REPORT
    if args.delete:
        return ScanMode.DELETE
    return None


def _load_config(args: argparse.Namespace) -> ReaperConfig:
    cfg = (
        ReaperConfig.from_file(args.config_file)
        if args.config_file
        else ReaperConfig()
    )

    # Override settings in config with anything specified here
    overrides: dict[str, Any] = {
        "hosts": args.host,
        "repositories": args.repository,
        "paths": args.path,
        "regexp": args.regexp,
        "dry_run": args.dry_run,
        "keep_going": args.keep_going,
        "debug": args.debug,
        "mode": _select_mode(args),
    }
    if args.before is not None:
        overrides.update(before=args.before, age=None)
    if args.age is not None:
        overrides.update(age=args.age, before=None)
    settings = cfg.model_dump(by_alias=False)
    settings.update({k: v for k, v in overrides.items() if v is not None})
    return ReaperConfig.model_validate(settings)


def main(argv: list[str] | None = None) -> None:
    """Scan Nexus and report or reap what the policy selects."""
    args = _parse_args(argv)
    cfg = _load_config(args)

    with Factory.standalone(cfg) as factory:
        logger = structlog.get_logger("nexus_reaper")
        try:
            summary = factory.create_reaper().run()
        except ReaperError as exc:
            logger.error(f"Aborting: {exc}")
            raise SystemExit(1) from exc
    if not summary.ok:
        raise SystemExit(1)
