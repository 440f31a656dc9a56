"""Testing layer ORM models: test_results, measurements, evaluations.

Durations (time_act, time_eval, time_range) use Interval: a native INTERVAL
on PostgreSQL, an epoch-offset DATETIME elsewhere.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy import (
    BigInteger,
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    Interval,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chemsonlab.infrastructure.database import Base


class TestResult(Base):
    """One test run of a product on a machine."""

    __test__ = False
    __tablename__ = "test_results"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    machine_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("machines.id", ondelete="CASCADE"), nullable=False, index=True
    )
    test_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    operator_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    drive_unit: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    mixer: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    loading_chute: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    additive: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    speed: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    mixer_temp: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    start_temp: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    meas_range: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    damping: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    test_time: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    sample_weight: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    code_number: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    plasticizer: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    plast_weight: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    load_time: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    load_speed: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    liquid: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    titrate: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    test_number: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    test_type: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    batch_group: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    test_method: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    colour: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    file_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    product: Mapped["Product"] = relationship()
    machine: Mapped["Machine"] = relationship()


class Measurement(Base):
    """A sampled point of a test curve.  High volume, hence the 64-bit key."""

    __tablename__ = "measurements"

    # SQLite only autoincrements INTEGER PRIMARY KEY, so downgrade there.
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True
    )
    test_result_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("test_results.id", ondelete="CASCADE"), nullable=False, index=True
    )
    time_act: Mapped[timedelta] = mapped_column(Interval, nullable=False)
    torque: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    bandwidth: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    stock_temp: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    speed: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    file_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    test_result: Mapped["TestResult"] = relationship()


class Evaluation(Base):
    __tablename__ = "evaluations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    test_result_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("test_results.id", ondelete="CASCADE"), nullable=False, index=True
    )
    point: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    point_name: Mapped[Optional[str]] = mapped_column(String(1), nullable=True)
    time_eval: Mapped[timedelta] = mapped_column(Interval, nullable=False)
    torque: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    bandwidth: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    stock_temp: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    speed: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    energy: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    time_range: Mapped[timedelta] = mapped_column(Interval, nullable=False)
    torque_range: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    time_eval_int: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    time_range_int: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    file_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    test_result: Mapped["TestResult"] = relationship()
