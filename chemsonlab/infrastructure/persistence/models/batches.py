"""Batch layer ORM models: batches, batch_test_results, coas."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chemsonlab.infrastructure.database import Base


class Batch(Base):
    __tablename__ = "batches"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    batch_name: Mapped[str] = mapped_column(Text, nullable=False)
    sample_by: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    suffix: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    product: Mapped["Product"] = relationship()


class BatchTestResult(Base):
    """Association: which test run belongs to which batch."""

    __tablename__ = "batch_test_results"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    batch_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("batches.id", ondelete="CASCADE"), nullable=False, index=True
    )
    test_result_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("test_results.id", ondelete="CASCADE"), nullable=False, index=True
    )

    batch: Mapped["Batch"] = relationship()
    test_result: Mapped["TestResult"] = relationship()


class Coa(Base):
    """Certificate of analysis issued for a batch of a product."""

    __tablename__ = "coas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )
    batch_name: Mapped[str] = mapped_column(Text, nullable=False)

    product: Mapped["Product"] = relationship()
