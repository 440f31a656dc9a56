"""SQLAlchemy repositories for QC labels, KPIs and the daily QC log."""

from __future__ import annotations

from chemsonlab.domain.models import (
    DailyQc,
    EntityKind,
    QcAveTestTimeKpi,
    QcLabel,
    QcPerformanceKpi,
)

from .base import SqlRepository


class SqlQcLabelRepository(SqlRepository[QcLabel]):
    kind = EntityKind.QC_LABEL
    domain_model = QcLabel
    kept_on_update = frozenset({"year", "month"})


class SqlQcPerformanceKpiRepository(SqlRepository[QcPerformanceKpi]):
    kind = EntityKind.QC_PERFORMANCE_KPI
    domain_model = QcPerformanceKpi
    kept_on_update = frozenset({"total_test"})


class SqlQcAveTestTimeKpiRepository(SqlRepository[QcAveTestTimeKpi]):
    kind = EntityKind.QC_AVE_TEST_TIME_KPI
    domain_model = QcAveTestTimeKpi


class SqlDailyQcRepository(SqlRepository[DailyQc]):
    kind = EntityKind.DAILY_QC
    domain_model = DailyQc
