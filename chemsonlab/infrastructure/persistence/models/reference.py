"""Reference layer ORM models: products, machines, customers."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from chemsonlab.infrastructure.database import Base


class Product(Base):
    """A compound tested by the lab, with its QC thresholds."""

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    sample_amount: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    db_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    comment: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    coa: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    colour: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    torque_warning: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    torque_fail: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    fusion_warning: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    fusion_fail: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    update_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    bulk_weight: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    paper_bag_weight: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    paper_bag_no: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    batch_weight: Mapped[Optional[float]] = mapped_column(Float, nullable=True)


class Machine(Base):
    __tablename__ = "machines"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class Customer(Base):
    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
