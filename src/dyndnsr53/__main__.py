"""Command line entry point: ``dyndnsr53 serve`` and ``dyndnsr53 version``."""

import argparse
import os
import sys
from typing import List, Optional

import uvicorn

from dyndnsr53.core.config import get_settings
from dyndnsr53.providers.factory import SUPPORTED_PROVIDERS
from dyndnsr53.version import version_text


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dyndnsr53", description="DynDNS Route53 Server"
    )
    commands = parser.add_subparsers(dest="command")

    serve = commands.add_parser(
        "serve",
        help="Run the DynDNS API server",
        description="Start the DynDNS-compatible API server for updating DNS records.",
    )
    serve.add_argument("-l", "--listen", help="Address to listen on (default :8080)")
    serve.add_argument(
        "-p",
        "--provider",
        help=f"DNS provider to use ({', '.join(SUPPORTED_PROVIDERS)})",
    )
    serve.add_argument(
        "--zone-id", help="Route53 hosted zone ID (required for route53 provider)"
    )

    commands.add_parser("version", help="Print version information")

    return parser


def _apply_overrides(args: argparse.Namespace) -> None:
    """Push command line flags into the environment read by Settings."""
    overrides = {
        "LISTEN": args.listen,
        "PROVIDER": args.provider,
        "ZONE_ID": args.zone_id,
    }

    for key, value in overrides.items():
        if value is not None:
            os.environ[key] = value

    get_settings.cache_clear()


def serve(args: argparse.Namespace) -> int:
    """Validate provider flags, then run uvicorn until interrupted."""
    _apply_overrides(args)
    settings = get_settings()

    if settings.provider_kind not in SUPPORTED_PROVIDERS + ("",):
        print(f"Error: unsupported provider type: {settings.provider}", file=sys.stderr)
        print(
            f"Supported providers: {', '.join(SUPPORTED_PROVIDERS)}", file=sys.stderr
        )
        return 1

    if settings.uses_route53 and not settings.zone_id:
        print(
            "Error: --zone-id is required when using route53 provider",
            file=sys.stderr,
        )
        return 1

    print(f"Starting server on {settings.listen_host}:{settings.listen_port}...")
    uvicorn.run(
        "dyndnsr53.app:app",
        host=settings.listen_host,
        port=settings.listen_port,
        log_level="warning",
    )

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Run the application."""
    args = _build_parser().parse_args(argv)

    if args.command == "version":
        print(version_text())
        return 0

    if args.command is None:
        # No subcommand means serve with settings from the environment
        args = _build_parser().parse_args(["serve"])

    return serve(args)


if __name__ == "__main__":
    sys.exit(main())
