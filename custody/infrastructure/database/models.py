"""SQLAlchemy ORM models."""

from sqlalchemy import BigInteger, Boolean, Column, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import Base

ADDRESS_LENGTH = 128

# Amount, balance and limit columns are signed 64-bit integers.
MAX_AMOUNT = 2**63 - 1

# The singleton configuration and emergency rows always use this key.
SINGLETON_ID = 1


class SystemConfig(Base):
    __tablename__ = "system_config"

    id = Column(Integer, primary_key=True, default=SINGLETON_ID)
    daily_limit = Column(BigInteger, nullable=False)
    monthly_limit = Column(BigInteger, nullable=False)
    high_value_threshold = Column(BigInteger, nullable=False)
    required_approvals = Column(Integer, nullable=False, default=2)
    hot_wallet_percentage = Column(Integer, nullable=False)
    cold_wallet_percentage = Column(Integer, nullable=False)
    hot_wallet = Column(String(ADDRESS_LENGTH), nullable=False)
    cold_wallet = Column(String(ADDRESS_LENGTH), nullable=False)
    guardian_count = Column(Integer, nullable=False, default=3)
    transaction_counter = Column(BigInteger, nullable=False, default=0)
    initialized_at = Column(BigInteger, nullable=False)


class Guardian(Base):
    __tablename__ = "guardians"

    address = Column(String(ADDRESS_LENGTH), primary_key=True)
    position = Column(Integer, nullable=False)
    role = Column(String(32), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    daily_limit = Column(BigInteger, nullable=False, default=0)
    monthly_limit = Column(BigInteger, nullable=False, default=0)
    approval_count = Column(Integer, nullable=False, default=0)
    last_approval = Column(BigInteger, nullable=False, default=0)

    approvals = relationship("TransactionApproval", back_populates="guardian_info")


class Wallet(Base):
    __tablename__ = "wallets"

    address = Column(String(ADDRESS_LENGTH), primary_key=True)
    kind = Column(String(10), nullable=False)  # hot, cold
    balance = Column(BigInteger, nullable=False, default=0)
    reserved_balance = Column(BigInteger, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)

    transactions = relationship("Transaction", back_populates="wallet")


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(BigInteger, primary_key=True, autoincrement=False)
    from_wallet = Column(String(ADDRESS_LENGTH), ForeignKey("wallets.address"), nullable=False, index=True)
    to_address = Column(String(ADDRESS_LENGTH), nullable=False)
    amount = Column(BigInteger, nullable=False)
    memo = Column(String(64), nullable=False, default="")
    tx_type = Column(String(20), nullable=False)
    status = Column(String(20), nullable=False, index=True)
    created_at = Column(BigInteger, nullable=False)
    executed_at = Column(BigInteger, nullable=True)
    requires_approval = Column(Boolean, nullable=False)

    wallet = relationship("Wallet", back_populates="transactions")
    approvals = relationship(
        "TransactionApproval",
        back_populates="transaction",
        cascade="all, delete-orphan",
        order_by="TransactionApproval.position",
        lazy="selectin",
    )


class TransactionApproval(Base):
    __tablename__ = "transaction_approvals"
    __table_args__ = (UniqueConstraint("transaction_id", "guardian", name="uq_transaction_approvals_guardian"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    transaction_id = Column(BigInteger, ForeignKey("transactions.id"), nullable=False, index=True)
    guardian = Column(String(ADDRESS_LENGTH), ForeignKey("guardians.address"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    approved_at = Column(BigInteger, nullable=False)

    transaction = relationship("Transaction", back_populates="approvals")
    guardian_info = relationship("Guardian", back_populates="approvals")


class SpendingBucket(Base):
    __tablename__ = "spending_buckets"

    period = Column(String(10), primary_key=True)  # day, month
    bucket = Column(BigInteger, primary_key=True)
    spent = Column(BigInteger, nullable=False, default=0)


class EmergencyState(Base):
    __tablename__ = "emergency_state"

    id = Column(Integer, primary_key=True, default=SINGLETON_ID)
    is_active = Column(Boolean, nullable=False, default=False)
    initiator = Column(String(ADDRESS_LENGTH), nullable=True)
    activated_at = Column(BigInteger, nullable=True)


class AuditEvent(Base):
    __tablename__ = "audit_events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    action = Column(String(50), nullable=False, index=True)
    actor = Column(String(ADDRESS_LENGTH), nullable=True)
    resource = Column(String(100), nullable=False)
    data = Column(Text)
    created_at = Column(BigInteger, nullable=False)
