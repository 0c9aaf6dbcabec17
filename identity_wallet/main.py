#!/usr/bin/env python3
"""
Identity Wallet - management CLI

Creates wallets, enrolls identities and reads or writes the credentials of an
enrolled identity in the configured database.
"""
import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

import structlog
from decouple import UndefinedValueError

from identity_wallet.adapters.database.manager import DatabaseManager
from identity_wallet.application.identity_service import WalletIdentityService
from identity_wallet.config import Config
from identity_wallet.core.errors import WalletError


logger = logging.getLogger(__name__)


def setup_logging(config: Config) -> None:
    """Configure stdlib logging and route structlog through it."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Engine chatter is controlled by DATABASE_ECHO, not LOG_LEVEL
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)

    renderer = (
        structlog.processors.JSONRenderer()
        if config.log_format == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="identity-wallet", description="Identity Wallet management"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="Create the database tables")

    create_wallet = subparsers.add_parser("create-wallet", help="Create an empty wallet")
    create_wallet.add_argument("--description", default=None)

    def identity_command(name: str, help_text: str) -> argparse.ArgumentParser:
        command = subparsers.add_parser(name, help=help_text)
        command.add_argument("wallet_id", type=int)
        command.add_argument("enrollment_id")
        return command

    identity_command("import-identity", "Enroll an identity in a wallet")
    identity_command("list", "List the credential names of an identity")
    identity_command("get", "Print a credential").add_argument("name")

    add = identity_command("add", "Add or replace a credential")
    add.add_argument("name")
    add.add_argument("value")

    identity_command("remove", "Remove a credential").add_argument("name")

    return parser


async def run_command(args: argparse.Namespace, db_manager: DatabaseManager) -> int:
    """Run one parsed command against an initialized database manager."""
    service = WalletIdentityService(db_manager)

    if args.command == "init-db":
        await db_manager.create_tables()
        print("Database tables created")
        return 0

    if args.command == "create-wallet":
        wallet = await service.create_wallet(args.description)
        print(wallet.id)
        return 0

    if args.command == "import-identity":
        await service.import_identity(args.wallet_id, args.enrollment_id)
        return 0

    wallet = await service.open_wallet(args.wallet_id, args.enrollment_id)

    if args.command == "list":
        for name in await wallet.list():
            print(name)
    elif args.command == "get":
        value = await wallet.get(args.name)
        if value is None:
            return 1
        if isinstance(value, bytes):
            # Key material is written as-is
            sys.stdout.flush()
            sys.stdout.buffer.write(value)
            sys.stdout.buffer.flush()
        else:
            print(value)
    elif args.command == "add":
        await wallet.add(args.name, args.value)
    elif args.command == "remove":
        await wallet.remove(args.name)

    return 0


async def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the Identity Wallet CLI."""
    args = build_parser().parse_args(argv)

    try:
        config = Config.from_env()
    except (UndefinedValueError, ValueError) as e:
        print(f"error: invalid configuration: {e}", file=sys.stderr)
        return 1
    setup_logging(config)

    db_manager = DatabaseManager(config)
    await db_manager.initialize()
    try:
        return await run_command(args, db_manager)
    except WalletError as e:
        logger.error(f"Command {args.command} failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        await db_manager.close()


def cli() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
