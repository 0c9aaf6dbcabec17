"""SQLAlchemy models for the identity wallet."""

from datetime import datetime
from typing import List

from sqlalchemy import (
    JSON,
    String,
    DateTime,
    Integer,
    ForeignKey,
    Text,
    Index,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import declarative_base, Mapped, mapped_column, relationship
from sqlalchemy.sql import func

Base = declarative_base()

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
CredentialData = JSON().with_variant(JSONB(), "postgresql")


class Wallet(Base):
    """Model for wallets."""

    __tablename__ = "wallets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    description: Mapped[str] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=func.now())

    # Relationships
    identities: Mapped[List["WalletIdentity"]] = relationship(
        "WalletIdentity", back_populates="wallet", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Wallet(id={self.id}, description='{self.description}')>"


class WalletIdentity(Base):
    """Model for the credentials of one identity enrolled in a wallet."""

    __tablename__ = "wallet_identities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    wallet_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("wallets.id", ondelete="CASCADE"), nullable=False
    )
    enrollment_id: Mapped[str] = mapped_column(String(255), nullable=False)

    # Credential name -> credential value
    data: Mapped[dict] = mapped_column(CredentialData, nullable=False, default=dict)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=func.now(), onupdate=func.now()
    )

    # Relationships
    wallet: Mapped["Wallet"] = relationship("Wallet", back_populates="identities")

    __table_args__ = (
        UniqueConstraint("wallet_id", "enrollment_id", name="uq_wallet_identities_wallet_enrollment"),
        Index("idx_wallet_identities_wallet", "wallet_id"),
    )

    def __repr__(self) -> str:
        return f"<WalletIdentity(wallet_id={self.wallet_id}, enrollment_id='{self.enrollment_id}')>"
