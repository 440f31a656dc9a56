"""SQLAlchemy repositories for test runs and their curve data."""

from __future__ import annotations

from chemsonlab.domain.models import EntityKind, Evaluation, Measurement, TestResult

from .base import SqlRepository


class SqlTestResultRepository(SqlRepository[TestResult]):
    kind = EntityKind.TEST_RESULT
    domain_model = TestResult
    kept_on_update = frozenset({"file_name"})


class SqlMeasurementRepository(SqlRepository[Measurement]):
    kind = EntityKind.MEASUREMENT
    domain_model = Measurement


class SqlEvaluationRepository(SqlRepository[Evaluation]):
    kind = EntityKind.EVALUATION
    domain_model = Evaluation
