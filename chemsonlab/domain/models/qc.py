"""QC bookkeeping: labels, monthly KPIs and the daily QC worklist.

year and month are stored as strings ("2024", "03") exactly as the lab
sheets record them; they are filtered by equality, not by date arithmetic.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from .reference import Machine, Product


class QcLabel(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int | None = None
    batch_name: str | None = None
    printed: bool | None = None
    product_id: int | None = None
    year: str | None = None
    month: str | None = None

    product: Product | None = None


class QcPerformanceKpi(BaseModel):
    """Monthly first/second/third-pass counts per product and machine."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    product_id: int | None = None
    machine_id: int | None = None
    year: str | None = None
    month: str | None = None
    total_test: int | None = None
    first_pass: int | None = None
    second_pass: int | None = None
    third_pass: int | None = None

    product: Product | None = None
    machine: Machine | None = None


class QcAveTestTimeKpi(BaseModel):
    """Monthly average test time (seconds) per product and machine."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    product_id: int | None = None
    machine_id: int | None = None
    year: str | None = None
    month: str | None = None
    total_test: int | None = None
    ave_test_time: int | None = None

    product: Product | None = None
    machine: Machine | None = None


class DailyQc(BaseModel):
    """One line of the daily QC worklist: a product awaiting or done testing."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    incoming_date: datetime
    product_id: int
    priority: int | None = None
    comment: str | None = None
    batches: str | None = None
    std_reqd: str | None = None
    extras: str | None = None
    mixes_reqd: int | None = None
    mixed: int | None = None
    test_status: str | None = None
    last_label: str | None = None
    last_batch: str | None = None
    tested_date: datetime | None = None
    year: str | None = None
    month: str | None = None

    product: Product | None = None
