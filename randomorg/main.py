"""Command-line entrypoint for one-off random.org calls.

The API key is read from `RANDOM_ORG_API_KEY` (environment or `.env`).
Results are printed to stdout as JSON using the service's field names and
timestamp format.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict

from randomorg.adapters import RandomOrgError
from randomorg.bootstrap import bootstrap_create_client
from randomorg.client import RandomOrgClient
from randomorg.config import SettingsLoadError, config_configure_logging, config_load_settings
from randomorg.domain import DOMAIN_DEFAULT_CHARACTERS
from randomorg.version import version_build_metadata


def main_build_argument_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Returns:
        argparse.ArgumentParser: Parser with one subcommand per remote operation.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    argument_parser = argparse.ArgumentParser(prog="randomorg", description="random.org JSON-RPC client")
    subparsers = argument_parser.add_subparsers(dest="command", required=True)

    integers_parser = subparsers.add_parser("integers", help="Generate random integers")
    integers_parser.add_argument("--min", dest="min", type=int, default=0)
    integers_parser.add_argument("--max", dest="max", type=int, default=100)
    integers_parser.add_argument("--limit", type=int, default=10)
    integers_parser.add_argument(
        "--no-replacement",
        dest="replacement",
        action="store_false",
        help="Pick unique values (no duplicates)",
    )

    fractions_parser = subparsers.add_parser("decimal-fractions", help="Generate decimal fractions in [0, 1]")
    fractions_parser.add_argument("--limit", type=int, default=10)
    fractions_parser.add_argument("--decimal-places", dest="decimal_places", type=int, default=4)

    gaussians_parser = subparsers.add_parser("gaussians", help="Generate values from a Gaussian distribution")
    gaussians_parser.add_argument("--limit", type=int, default=10)
    gaussians_parser.add_argument("--mean", type=float, default=0.0)
    gaussians_parser.add_argument("--standard-deviation", dest="standard_deviation", type=float, default=1.0)
    gaussians_parser.add_argument("--significant-digits", dest="significant_digits", type=int, default=8)

    strings_parser = subparsers.add_parser("strings", help="Generate random strings")
    strings_parser.add_argument("--limit", type=int, default=10)
    strings_parser.add_argument("--length", type=int, default=10)
    strings_parser.add_argument("--characters", type=str, default=DOMAIN_DEFAULT_CHARACTERS)

    uuids_parser = subparsers.add_parser("uuids", help="Generate version 4 UUIDs")
    uuids_parser.add_argument("--limit", type=int, default=10)

    blobs_parser = subparsers.add_parser("blobs", help="Generate base64-encoded random blobs")
    blobs_parser.add_argument("--limit", type=int, default=1)
    blobs_parser.add_argument("--size", type=int, default=128, help="Blob size in bits, divisible by 8")

    subparsers.add_parser("usage", help="Show API key usage counters")
    subparsers.add_parser("version", help="Show library and runtime metadata")
    return argument_parser


def main_execute_command(client: RandomOrgClient, parsed_arguments: argparse.Namespace) -> str:
    """Run one parsed subcommand and return its JSON output.

    Args:
        client: Configured random.org client.
        parsed_arguments: Parsed CLI arguments.

    Returns:
        str: JSON document describing the result.

    Raises:
        RandomOrgError: Raised when the remote call fails.
        ValueError: Raised for an unknown command.
    """

    command = parsed_arguments.command
    if command == "integers":
        result = client.generate_integers(
            parsed_arguments.min,
            parsed_arguments.max,
            parsed_arguments.limit,
            parsed_arguments.replacement,
        )
    elif command == "decimal-fractions":
        result = client.generate_decimal_fractions(parsed_arguments.limit, parsed_arguments.decimal_places)
    elif command == "gaussians":
        result = client.generate_gaussians(
            parsed_arguments.limit,
            parsed_arguments.mean,
            parsed_arguments.standard_deviation,
            parsed_arguments.significant_digits,
        )
    elif command == "strings":
        result = client.generate_strings(parsed_arguments.limit, parsed_arguments.length, parsed_arguments.characters)
    elif command == "uuids":
        result = client.generate_uuids(parsed_arguments.limit)
    elif command == "blobs":
        result = client.generate_blobs(parsed_arguments.limit, parsed_arguments.size)
    elif command == "usage":
        result = client.get_usage()
    else:
        raise ValueError(f"unknown command: {command}")
    return result.model_dump_json(by_alias=True)


def main(argv: list[str] | None = None) -> None:
    """Run the selected CLI command with validated configuration.

    Args:
        argv: Optional argument list; defaults to `sys.argv[1:]`.

    Returns:
        None: Prints the command output to stdout.

    Raises:
        SystemExit: Raised with status 1 on configuration or request failure.
    """

    parsed_arguments = main_build_argument_parser().parse_args(argv)

    if parsed_arguments.command == "version":
        print(json.dumps(asdict(version_build_metadata())))
        return

    try:
        settings = config_load_settings()
    except SettingsLoadError as error:
        print(str(error), file=sys.stderr)
        raise SystemExit(1) from error

    config_configure_logging(settings)
    try:
        with bootstrap_create_client(settings) as client:
            output = main_execute_command(client, parsed_arguments)
    except RandomOrgError as error:
        print(f"random.org request failed: {error}", file=sys.stderr)
        raise SystemExit(1) from error

    print(output)


if __name__ == "__main__":
    main()
