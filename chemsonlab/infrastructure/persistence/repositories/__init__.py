"""Concrete SQLAlchemy repository implementations.

Exports all SqlRepository classes and the get_repositories() factory function
for wiring at the application boundary.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from chemsonlab.domain.models.enums import EntityKind

from .base import SqlRepository
from .batches import SqlBatchRepository, SqlBatchTestResultRepository, SqlCoaRepository
from .orders import SqlCustomerOrderRepository, SqlProductSpecificationRepository
from .qc import (
    SqlDailyQcRepository,
    SqlQcAveTestTimeKpiRepository,
    SqlQcLabelRepository,
    SqlQcPerformanceKpiRepository,
)
from .reference import SqlCustomerRepository, SqlMachineRepository, SqlProductRepository
from .reports import SqlReportRepository, SqlTestResultReportRepository
from .testing import SqlEvaluationRepository, SqlMeasurementRepository, SqlTestResultRepository


@dataclass
class Repositories:
    """All repository instances bound to a single AsyncSession.

    Field names match EntityKind values, so for_kind() can look them up.
    """

    product: SqlProductRepository
    machine: SqlMachineRepository
    customer: SqlCustomerRepository
    product_specification: SqlProductSpecificationRepository
    customer_order: SqlCustomerOrderRepository
    test_result: SqlTestResultRepository
    measurement: SqlMeasurementRepository
    evaluation: SqlEvaluationRepository
    batch: SqlBatchRepository
    batch_test_result: SqlBatchTestResultRepository
    report: SqlReportRepository
    test_result_report: SqlTestResultReportRepository
    coa: SqlCoaRepository
    qc_label: SqlQcLabelRepository
    qc_performance_kpi: SqlQcPerformanceKpiRepository
    qc_ave_test_time_kpi: SqlQcAveTestTimeKpiRepository
    daily_qc: SqlDailyQcRepository

    def for_kind(self, kind: EntityKind | str) -> SqlRepository:
        """Repository for the given kind; raises ValueError for an unknown kind."""
        return getattr(self, EntityKind(kind).value)


def get_repositories(session: AsyncSession) -> Repositories:
    """Construct all repositories bound to the given session.

        async with session_scope() as session:
            repos = get_repositories(session)
            batches = await repos.batch.list({"productName": "PVC-100"})
    """
    return Repositories(
        product=SqlProductRepository(session),
        machine=SqlMachineRepository(session),
        customer=SqlCustomerRepository(session),
        product_specification=SqlProductSpecificationRepository(session),
        customer_order=SqlCustomerOrderRepository(session),
        test_result=SqlTestResultRepository(session),
        measurement=SqlMeasurementRepository(session),
        evaluation=SqlEvaluationRepository(session),
        batch=SqlBatchRepository(session),
        batch_test_result=SqlBatchTestResultRepository(session),
        report=SqlReportRepository(session),
        test_result_report=SqlTestResultReportRepository(session),
        coa=SqlCoaRepository(session),
        qc_label=SqlQcLabelRepository(session),
        qc_performance_kpi=SqlQcPerformanceKpiRepository(session),
        qc_ave_test_time_kpi=SqlQcAveTestTimeKpiRepository(session),
        daily_qc=SqlDailyQcRepository(session),
    )


__all__ = [
    "SqlRepository",
    "SqlProductRepository",
    "SqlMachineRepository",
    "SqlCustomerRepository",
    "SqlProductSpecificationRepository",
    "SqlCustomerOrderRepository",
    "SqlTestResultRepository",
    "SqlMeasurementRepository",
    "SqlEvaluationRepository",
    "SqlBatchRepository",
    "SqlBatchTestResultRepository",
    "SqlReportRepository",
    "SqlTestResultReportRepository",
    "SqlCoaRepository",
    "SqlQcLabelRepository",
    "SqlQcPerformanceKpiRepository",
    "SqlQcAveTestTimeKpiRepository",
    "SqlDailyQcRepository",
    "Repositories",
    "get_repositories",
]
