"""SQLAlchemy models for order placement tracking."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, relationship


class Base(DeclarativeBase):
    pass


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderPlacement(Base):
    """
    A single attempt to place an order with Klarna using an authorization token.

    The klarna_order_id is unique: a token can only be turned into one Klarna
    order, so a second successful placement for the same id is a bug upstream.
    """

    __tablename__ = "order_placements"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    order_number = Column(String(50), nullable=False, index=True)
    region = Column(String(10), nullable=False)
    currency = Column(String(3), nullable=False)
    order_amount = Column(Integer, nullable=False)  # Minor units
    status = Column(String(20), nullable=False, default="pending")
    klarna_order_id = Column(String(100), nullable=True, unique=True)
    fraud_status = Column(String(30), nullable=True)
    error = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    audit_logs = relationship("AuditLog", back_populates="placement", lazy="raise")


class AuditLog(Base):
    """
    Immutable audit trail entry.

    Every step of a placement (payload built, provider call, success/failure)
    gets an entry. These are append-only and never modified.
    """

    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    placement_id = Column(String(36), ForeignKey("order_placements.id"), nullable=True, index=True)
    action = Column(String(50), nullable=False)
    details = Column(Text, nullable=True)
    timestamp = Column(DateTime(timezone=True), default=_utcnow)

    placement = relationship("OrderPlacement", back_populates="audit_logs")
