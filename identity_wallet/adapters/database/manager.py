"""Database infrastructure layer for wallet records."""

import base64
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    AsyncEngine,
    create_async_engine,
    async_sessionmaker,
)
from sqlalchemy.pool import NullPool
from sqlalchemy import select, update, delete

from ...config import Config
from .models import Base, Wallet as WalletModel, WalletIdentity as WalletIdentityModel
from ...core.entities import Credential, WalletInfo, WalletRecord
from ...core.errors import NotFoundError, StoreError

logger = logging.getLogger(__name__)

# JSON has no bytes type; byte credentials are stored as {"__bytes__": "<base64>"}
_BYTES_TAG = "__bytes__"


def encode_credential_data(data: Dict[str, Credential]) -> Dict[str, Any]:
    """Convert a credential mapping into a JSON-safe mapping."""
    encoded = {}
    for name, value in data.items():
        if isinstance(value, (bytes, bytearray)):
            encoded[name] = {_BYTES_TAG: base64.b64encode(bytes(value)).decode("ascii")}
        else:
            encoded[name] = value
    return encoded


def decode_credential_data(data: Optional[Dict[str, Any]]) -> Dict[str, Credential]:
    """Reverse encode_credential_data()."""
    decoded = {}
    for name, value in (data or {}).items():
        if isinstance(value, dict) and list(value) == [_BYTES_TAG]:
            decoded[name] = base64.b64decode(value[_BYTES_TAG])
        else:
            decoded[name] = value
    return decoded


class DatabaseManager:
    """Manages database connection and provides wallet repository methods.

    Implements the RecordStore protocol, so it can back a WalletAdapter directly.
    """

    def __init__(self, config: Config):
        self.config = config
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    async def initialize(self) -> None:
        """Initialize database engine and session factory."""
        if self._engine is not None:
            logger.warning("Database manager already initialized")
            return

        self._engine = create_async_engine(
            self.config.get_database_url(),
            echo=self.config.database_echo,
            poolclass=NullPool,
            pool_pre_ping=True,  # Verify connections before use
        )

        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

        logger.info("Database manager initialized successfully")

    async def close(self) -> None:
        """Close database engine and clean up resources."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database manager closed")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get a database session with automatic cleanup."""
        if self._session_factory is None:
            raise RuntimeError(
                "Database manager not initialized. Call initialize() first."
            )

        async with self._session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    @asynccontextmanager
    async def _store_session(self, operation: str) -> AsyncGenerator[AsyncSession, None]:
        """Session for a repository method; database failures surface as StoreError."""
        try:
            async with self.get_session() as session:
                yield session
        except SQLAlchemyError as e:
            logger.error(f"Failed to {operation}: {e}")
            raise StoreError(f"Failed to {operation}: {e}") from e

    async def create_tables(self) -> None:
        """Create all database tables. Used for testing and initial setup."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        logger.info("Database tables created successfully")

    async def drop_tables(self) -> None:
        """Drop all database tables. Used for testing cleanup."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

        logger.info("Database tables dropped successfully")

    @property
    def engine(self) -> AsyncEngine:
        """Get the database engine."""
        if self._engine is None:
            raise RuntimeError(
                "Database manager not initialized. Call initialize() first."
            )
        return self._engine

    # Conversion methods
    def _convert_db_wallet_to_core_entity(self, wallet_record: WalletModel) -> WalletInfo:
        return WalletInfo(
            id=wallet_record.id,
            description=wallet_record.description,
            created_at=wallet_record.created_at,
        )

    def _convert_db_identity_to_core_entity(self, identity_record: WalletIdentityModel) -> WalletRecord:
        """Convert database WalletIdentity model to core WalletRecord entity.

        Args:
            identity_record: SQLAlchemy WalletIdentity instance

        Returns:
            Detached WalletRecord with decoded credential data
        """
        return WalletRecord(
            wallet_id=identity_record.wallet_id,
            enrollment_id=identity_record.enrollment_id,
            data=decode_credential_data(identity_record.data),
            id=identity_record.id,
        )

    # Wallet repository methods
    async def create_wallet(self, description: Optional[str] = None) -> WalletInfo:
        """Create a new, empty wallet."""
        async with self._store_session("create wallet") as session:
            wallet = WalletModel(description=description)
            session.add(wallet)
            await session.commit()
            await session.refresh(wallet)
            logger.info(f"Created wallet {wallet.id}")
            return self._convert_db_wallet_to_core_entity(wallet)

    async def get_wallet(self, wallet_id: int) -> Optional[WalletInfo]:
        """Get a wallet by its database ID."""
        async with self._store_session(f"get wallet {wallet_id}") as session:
            wallet = await session.get(WalletModel, wallet_id)
            return self._convert_db_wallet_to_core_entity(wallet) if wallet else None

    async def delete_wallet(self, wallet_id: int) -> bool:
        """Delete a wallet together with all of its identities."""
        async with self._store_session(f"delete wallet {wallet_id}") as session:
            await session.execute(
                delete(WalletIdentityModel).where(WalletIdentityModel.wallet_id == wallet_id)
            )
            result = await session.execute(
                delete(WalletModel).where(WalletModel.id == wallet_id)
            )
            await session.commit()
            return result.rowcount > 0

    # WalletIdentity repository methods
    async def create_wallet_identity(
        self,
        wallet_id: int,
        enrollment_id: str,
        data: Optional[Dict[str, Credential]] = None,
    ) -> WalletRecord:
        """Create the identity record for an enrollment ID in a wallet.

        Args:
            wallet_id: ID of an existing wallet
            enrollment_id: Enrollment ID of the identity
            data: Initial credentials

        Raises:
            NotFoundError: If the wallet does not exist
            StoreError: If the identity already exists or the insert fails
        """
        async with self._store_session(
            f"create identity '{enrollment_id}' in wallet {wallet_id}"
        ) as session:
            if await session.get(WalletModel, wallet_id) is None:
                raise NotFoundError(wallet_id)

            identity = WalletIdentityModel(
                wallet_id=wallet_id,
                enrollment_id=enrollment_id,
                data=encode_credential_data(data or {}),
            )
            session.add(identity)
            await session.commit()
            await session.refresh(identity)
            return self._convert_db_identity_to_core_entity(identity)

    async def list_enrollment_ids(self, wallet_id: int) -> List[str]:
        """Get the enrollment IDs of all identities in a wallet, sorted."""
        async with self._store_session(f"list identities in wallet {wallet_id}") as session:
            result = await session.execute(
                select(WalletIdentityModel.enrollment_id)
                .where(WalletIdentityModel.wallet_id == wallet_id)
                .order_by(WalletIdentityModel.enrollment_id)
            )
            return list(result.scalars().all())

    async def delete_wallet_identity(self, wallet_id: int, enrollment_id: str) -> bool:
        """Delete the identity record for an enrollment ID in a wallet."""
        async with self._store_session(
            f"delete identity '{enrollment_id}' in wallet {wallet_id}"
        ) as session:
            result = await session.execute(
                delete(WalletIdentityModel).where(
                    WalletIdentityModel.wallet_id == wallet_id,
                    WalletIdentityModel.enrollment_id == enrollment_id,
                )
            )
            await session.commit()
            return result.rowcount > 0

    # RecordStore protocol
    async def find_record(self, wallet_id: int, enrollment_id: str) -> WalletRecord:
        """Fetch the identity record for a wallet and enrollment ID."""
        async with self._store_session(
            f"find identity '{enrollment_id}' in wallet {wallet_id}"
        ) as session:
            result = await session.execute(
                select(WalletIdentityModel).where(
                    WalletIdentityModel.wallet_id == wallet_id,
                    WalletIdentityModel.enrollment_id == enrollment_id,
                )
            )
            identity = result.scalar_one_or_none()
            if identity is None:
                raise NotFoundError(wallet_id, enrollment_id)
            return self._convert_db_identity_to_core_entity(identity)

    async def save_record(self, record: WalletRecord) -> None:
        """Write the record's credential data back, replacing what is stored."""
        async with self._store_session(
            f"save identity '{record.enrollment_id}' in wallet {record.wallet_id}"
        ) as session:
            result = await session.execute(
                update(WalletIdentityModel)
                .where(
                    WalletIdentityModel.wallet_id == record.wallet_id,
                    WalletIdentityModel.enrollment_id == record.enrollment_id,
                )
                .values(data=encode_credential_data(record.data))
            )
            await session.commit()
            if result.rowcount == 0:
                raise NotFoundError(record.wallet_id, record.enrollment_id)


# Global database manager instance
_db_manager: Optional[DatabaseManager] = None


def get_database_manager() -> DatabaseManager:
    """Get the global database manager instance."""
    if _db_manager is None:
        raise RuntimeError(
            "Database manager not initialized. Call initialize_database() first."
        )
    return _db_manager


async def initialize_database(config: Config) -> DatabaseManager:
    """Initialize the global database manager."""
    global _db_manager
    if _db_manager is not None:
        logger.warning("Database manager already initialized")
        return _db_manager

    _db_manager = DatabaseManager(config)
    await _db_manager.initialize()
    return _db_manager


async def close_database() -> None:
    """Close the global database manager."""
    global _db_manager
    if _db_manager is not None:
        await _db_manager.close()
        _db_manager = None
