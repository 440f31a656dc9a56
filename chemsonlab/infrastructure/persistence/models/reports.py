"""Report layer ORM models: reports, test_result_reports."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import BigInteger, Boolean, DateTime, Float, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chemsonlab.infrastructure.database import Base


class Report(Base):
    __tablename__ = "reports"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    create_by: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    create_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class TestResultReport(Base):
    """Per batch-test-result verdict within a report.

    Both foreign keys are optional: a verdict can be drafted before it is
    attached to a report.
    """

    __test__ = False
    __tablename__ = "test_result_reports"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    report_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("reports.id"), nullable=True, index=True
    )
    batch_test_result_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("batch_test_results.id"), nullable=True, index=True
    )
    standard_reference: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    torque_diff: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    fusion_diff: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    result: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    comment: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    ave_test_time: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)
    file_location: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    report: Mapped[Optional["Report"]] = relationship()
    batch_test_result: Mapped[Optional["BatchTestResult"]] = relationship()
