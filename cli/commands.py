"""
CLI subcommand implementations for the Pronto provisioning SDK.

Subcommands::

    pronto-provisioning issuer-data TAG_ID [--id-attribute A] [--api-key K] [--environment E]
    pronto-provisioning passes      USER_ID [--api-key K] [--environment E]
"""

import argparse
import json
import logging
import sys

from dotenv import find_dotenv, load_dotenv

from pronto_provisioning import (
    ProntoAPIClient,
    ProntoConfiguration,
    ProvisioningError,
    TagIdAttribute,
)
from pronto_provisioning.configuration import (
    API_KEY_ENV_VAR,
    DEFAULT_TIMEOUT_SECONDS,
    ENVIRONMENT_ENV_VAR,
)

logger = logging.getLogger(__name__)


def resolve_configuration(args: argparse.Namespace) -> ProntoConfiguration:
    """Build a configuration from CLI flags, falling back to ``PRONTO_*`` env vars.

    Priority:
        1. Explicit ``--api-key`` / ``--environment`` / ``--timeout`` flags.
        2. ``PRONTO_API_KEY``, ``PRONTO_ENVIRONMENT``, ``PRONTO_TIMEOUT_SECONDS``.

    Raises ``NotConfiguredError`` if no API key is found and ``ValueError``
    for malformed values.
    """
    return ProntoConfiguration.from_env(
        dotenv=False,
        api_key=args.api_key,
        environment=args.environment,
        timeout_seconds=args.timeout,
    )


def _print_json(payload) -> None:
    print(json.dumps(payload, indent=2))


# ---------------------------------------------------------------------------
# Subcommand: issuer-data
# ---------------------------------------------------------------------------

def cmd_issuer_data(args, client: ProntoAPIClient) -> None:
    result = client.fetch_issuer_data(args.tag_id, TagIdAttribute(args.id_attribute))
    _print_json({
        "issuer_data": result.issuer_data_base64,
        "signature": result.signature_base64,
        "tag_id": result.tag_id,
    })


# ---------------------------------------------------------------------------
# Subcommand: passes
# ---------------------------------------------------------------------------

def cmd_passes(args, client: ProntoAPIClient) -> None:
    passes = client.fetch_passes(args.user_id)
    _print_json([p.to_dict() for p in passes])


COMMANDS = {
    "issuer-data": cmd_issuer_data,
    "passes": cmd_passes,
}


def _add_connection_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--api-key", help=f"API user auth token (or set {API_KEY_ENV_VAR})")
    parser.add_argument(
        "--environment",
        help=(
            "production, staging, demo, development:<host> or an http(s) URL "
            f"(or set {ENVIRONMENT_ENV_VAR}; default: production)"
        ),
    )
    parser.add_argument(
        "--timeout", type=float, default=None,
        help=f"Request timeout in seconds (default: {DEFAULT_TIMEOUT_SECONDS:g})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log HTTP activity to stderr",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="pronto-provisioning",
        description="Query the Pronto in-app provisioning API",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- issuer-data ---
    p_issuer = subparsers.add_parser("issuer-data", help="Fetch issuer data for a tag")
    p_issuer.add_argument("tag_id", help="Identifier of the tag to provision")
    p_issuer.add_argument(
        "--id-attribute",
        choices=[a.value for a in TagIdAttribute],
        default=TagIdAttribute.REFERENCE_ID.value,
        help="Attribute used to look the tag up (default: reference_id)",
    )
    _add_connection_args(p_issuer)

    # --- passes ---
    p_passes = subparsers.add_parser("passes", help="List a user's passes")
    p_passes.add_argument("user_id", help="Pronto user id")
    _add_connection_args(p_passes)

    return parser


def main(argv=None):
    """Entry point for the CLI."""
    load_dotenv(find_dotenv(usecwd=True))
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        configuration = resolve_configuration(args)
    except (ProvisioningError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    logger.debug("Using environment %s", configuration.environment)
    client = ProntoAPIClient(configuration)

    try:
        COMMANDS[args.command](args, client)
    except ProvisioningError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
