"""SQLAlchemy repositories for reports and their per-batch verdicts."""

from __future__ import annotations

from chemsonlab.domain.models import EntityKind, Report, TestResultReport

from .base import SqlRepository


class SqlReportRepository(SqlRepository[Report]):
    kind = EntityKind.REPORT
    domain_model = Report


class SqlTestResultReportRepository(SqlRepository[TestResultReport]):
    kind = EntityKind.TEST_RESULT_REPORT
    domain_model = TestResultReport
    kept_on_update = frozenset({"comment", "ave_test_time", "file_location"})
