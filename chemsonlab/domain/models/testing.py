"""Test results and the raw curve data recorded for them.

A TestResult is one run of a product on a machine.  Measurements are the
sampled curve points; evaluations are the named characteristic points
(loading peak, fusion, end) derived from that curve.

time_act / time_eval / time_range are durations from the start of the run
and are required: a missing duration is an input error, never zero.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field

from .reference import Machine, Product


class TestResult(BaseModel):
    __test__ = False  # not a pytest test class

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    product_id: int
    machine_id: int
    test_date: datetime
    operator_name: str | None = None
    drive_unit: str | None = None
    mixer: str | None = None
    loading_chute: str | None = None
    additive: str | None = None
    speed: float | None = None
    mixer_temp: float | None = None
    start_temp: float | None = None
    meas_range: int | None = None
    damping: int | None = None
    test_time: float | None = None
    sample_weight: float | None = None
    code_number: str | None = None
    plasticizer: str | None = None
    plast_weight: float | None = None
    load_time: float | None = None
    load_speed: float | None = None
    liquid: str | None = None
    titrate: float | None = None
    test_number: int | None = None
    test_type: str | None = None
    batch_group: str | None = None
    test_method: str | None = None
    colour: str | None = None
    status: bool | None = None
    file_name: str | None = None

    product: Product | None = None
    machine: Machine | None = None


class Measurement(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int | None = None
    test_result_id: int
    time_act: timedelta
    torque: float | None = None
    bandwidth: float | None = None
    stock_temp: float | None = None
    speed: float | None = None
    file_name: str | None = None

    test_result: TestResult | None = None


class Evaluation(BaseModel):
    """A characteristic point on a test curve.

    point_name is a single letter label (e.g. "X", "A", "B", "E").
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    test_result_id: int
    point: int | None = None
    point_name: str | None = Field(default=None, min_length=1, max_length=1)
    time_eval: timedelta
    torque: float | None = None
    bandwidth: float | None = None
    stock_temp: float | None = None
    speed: float | None = None
    energy: float | None = None
    time_range: timedelta
    torque_range: float | None = None
    time_eval_int: int | None = None
    time_range_int: int | None = None
    file_name: str | None = None

    test_result: TestResult | None = None
