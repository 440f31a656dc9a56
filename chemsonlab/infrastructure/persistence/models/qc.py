"""QC layer ORM models: qc_labels, qc_performance_kpis, qc_ave_test_time_kpis, daily_qcs."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import BigInteger, Boolean, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chemsonlab.infrastructure.database import Base


class QcLabel(Base):
    __tablename__ = "qc_labels"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    batch_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    printed: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    product_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("products.id"), nullable=True, index=True
    )
    year: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    month: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    product: Mapped[Optional["Product"]] = relationship()


class QcPerformanceKpi(Base):
    __tablename__ = "qc_performance_kpis"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("products.id"), nullable=True, index=True
    )
    machine_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("machines.id"), nullable=True, index=True
    )
    year: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    month: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    total_test: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    first_pass: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    second_pass: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    third_pass: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    product: Mapped[Optional["Product"]] = relationship()
    machine: Mapped[Optional["Machine"]] = relationship()


class QcAveTestTimeKpi(Base):
    __tablename__ = "qc_ave_test_time_kpis"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("products.id"), nullable=True, index=True
    )
    machine_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("machines.id"), nullable=True, index=True
    )
    year: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    month: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    total_test: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    ave_test_time: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)  # seconds

    product: Mapped[Optional["Product"]] = relationship()
    machine: Mapped[Optional["Machine"]] = relationship()


class DailyQc(Base):
    """Daily QC worklist row.  year/month are the sheet's own string labels."""

    __tablename__ = "daily_qcs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    incoming_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    priority: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    comment: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    batches: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    std_reqd: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    extras: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    mixes_reqd: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    mixed: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    test_status: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    last_label: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    last_batch: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    tested_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    year: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    month: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    product: Mapped["Product"] = relationship()
