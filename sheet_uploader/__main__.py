"""Command-line interface for sheet driven uploads."""

from __future__ import annotations

import argparse
import sys

from .config import DEFAULT_WORKERS, YOUTUBE_PRIVACY, load_config
from .exceptions import FatalSetupError
from .helpers.formatting import Fore, Style
from .helpers.logging import log_timing


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sheet-uploader",
        description="Upload the videos listed in a spreadsheet to YouTube",
    )
    parser.add_argument("--dir", dest="base_dir", default="", help="Directory containing videos.")
    parser.add_argument("--from", dest="first", type=int, default=0, help="First line to process.")
    parser.add_argument("--to", dest="last", type=int, default=0, help="Last line to process.")
    parser.add_argument(
        "--workers",
        type=int,
        default=DEFAULT_WORKERS,
        help="Number of rows uploaded in parallel.",
    )
    parser.add_argument(
        "--privacy",
        default=YOUTUBE_PRIVACY,
        choices=("private", "unlisted", "public"),
        help="Privacy status of uploaded videos.",
    )
    parser.add_argument("--env-file", default=".env", help="Optional .env file with credentials.")
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = create_parser()
    args = parser.parse_args(argv)
    if not args.base_dir or args.first <= 0 or args.last <= 0:
        parser.error("Please provide all arguments! (--dir, --from and --to)")
    if args.last < args.first:
        parser.error("--to must not be smaller than --from")
    if args.workers < 1:
        parser.error("--workers must be at least 1")
    return args


def _get_authorize():
    from .integrations.google.auth import authorize

    return authorize


def _get_run_range():
    from .scheduler import run_range

    return run_range


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        config = load_config(args.env_file, privacy=args.privacy)
        client = _get_authorize()(config)
        with log_timing(f"Uploading rows {args.first}-{args.last}"):
            summary = _get_run_range()(
                client,
                config.sheet_id,
                args.base_dir,
                args.first,
                args.last,
                args.workers,
                privacy=config.privacy,
            )
    except FatalSetupError as exc:
        print(f"{Fore.RED}Fatal: {exc}{Style.RESET_ALL}", file=sys.stderr)
        return 1

    print(
        f"{Fore.GREEN}{len(summary.succeeded)} uploaded{Style.RESET_ALL}, "
        f"{Fore.RED}{len(summary.failed)} failed{Style.RESET_ALL}"
    )
    if summary.failed:
        print(f"Failed rows: {', '.join(str(n) for n in summary.failed)}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
