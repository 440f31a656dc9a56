"""Reports and the per-batch verdicts they contain."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from .batches import BatchTestResult


class Report(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int | None = None
    create_by: str | None = None
    create_date: datetime
    status: bool = True


class TestResultReport(BaseModel):
    """Verdict for one batch test result within a report.

    torque_diff / fusion_diff are the deviations from the standard referenced
    by standard_reference; result is the pass/fail outcome.
    ave_test_time is in seconds.
    """

    __test__ = False

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    report_id: int | None = None
    batch_test_result_id: int | None = None
    standard_reference: str | None = None
    torque_diff: float | None = None
    fusion_diff: float | None = None
    result: bool | None = None
    comment: str | None = None
    ave_test_time: int | None = None
    file_location: str | None = None

    report: Report | None = None
    batch_test_result: BatchTestResult | None = None
