"""Reference data: products, machines and customers.

These are pure domain objects with no ORM or persistence concerns.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class Product(BaseModel):
    """A compound tested by the lab.

    torque_*/fusion_* are the warning and fail thresholds used when a test
    result report compares a batch against its standard.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    name: str
    status: bool = True
    sample_amount: float | None = None
    db_date: datetime | None = None
    comment: str | None = None
    coa: bool | None = None
    colour: str | None = None
    torque_warning: float | None = None
    torque_fail: float | None = None
    fusion_warning: float | None = None
    fusion_fail: float | None = None
    update_date: datetime | None = None
    bulk_weight: float | None = None
    paper_bag_weight: float | None = None
    paper_bag_no: int | None = None
    batch_weight: float | None = None


class Machine(BaseModel):
    """A rheometer/mixer the tests run on."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    name: str
    status: bool = True


class Customer(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int | None = None
    name: str
    email: str
    status: bool = True
