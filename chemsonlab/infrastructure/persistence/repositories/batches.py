"""SQLAlchemy repositories for batches, batch test results and COAs."""

from __future__ import annotations

from chemsonlab.domain.models import Batch, BatchTestResult, Coa, EntityKind

from .base import SqlRepository


class SqlBatchRepository(SqlRepository[Batch]):
    kind = EntityKind.BATCH
    domain_model = Batch


class SqlBatchTestResultRepository(SqlRepository[BatchTestResult]):
    kind = EntityKind.BATCH_TEST_RESULT
    domain_model = BatchTestResult


class SqlCoaRepository(SqlRepository[Coa]):
    kind = EntityKind.COA
    domain_model = Coa
