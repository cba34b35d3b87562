"""Command line entry point for aptos-wallet."""

import argparse
import sys

from loguru import logger

from aptos_wallet.config import get_settings
from aptos_wallet.exceptions import IdentityError, UnitsError
from aptos_wallet.identity import derive_identity, identity_source
from aptos_wallet.units import format_units, parse_units


def setup_logging(level: str = "INFO") -> None:
    """Configure loguru logging."""
    logger.remove()  # Remove default handler
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aptos-wallet",
        description="Derive Aptos identities and convert token amounts",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: LOG_LEVEL or INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    derive = subparsers.add_parser("derive", help="Derive an identity")
    source = derive.add_mutually_exclusive_group()
    source.add_argument("--password", help="Derive deterministically from a password")
    source.add_argument("--mnemonic", help="Derive from an existing seed phrase")
    source.add_argument("--private-key", help="Use an existing private key (hex)")
    derive.add_argument(
        "--show-secrets",
        action="store_true",
        help="Also print the seed phrase and private key",
    )

    fmt = subparsers.add_parser("format-units", help="Base units -> decimal string")
    fmt.add_argument("value", type=int, help="Amount in base units")
    fmt.add_argument("decimals", type=int, help="Token precision")

    parse = subparsers.add_parser("parse-units", help="Decimal string -> base units")
    parse.add_argument("value", help="Decimal amount, e.g. 1.5")
    parse.add_argument("decimals", type=int, help="Token precision")

    return parser


def run_derive(args: argparse.Namespace) -> None:
    config = get_settings().wallet
    identity = derive_identity(
        identity_source(
            password=args.password,
            mnemonic=args.mnemonic,
            private_key=args.private_key,
        ),
        private_key_template=config.private_key_template.get_secret_value(),
        derivation_path=config.derivation_path,
    )
    print(f"address: {identity.address_hex}")
    if args.show_secrets:
        print(f"mnemonic: {identity.mnemonic or '-'}")
        print(f"private_key: {identity.private_key_hex}")


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level or get_settings().log.level)

    try:
        if args.command == "derive":
            run_derive(args)
        elif args.command == "format-units":
            print(format_units(args.value, args.decimals))
        elif args.command == "parse-units":
            print(parse_units(args.value, args.decimals))
    except (IdentityError, UnitsError) as e:
        logger.error("{}", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
