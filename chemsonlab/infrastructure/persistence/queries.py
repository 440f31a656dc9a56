"""Per-entity query configuration.

Each QuerySpec declares, for one entity kind, which relationships are joined,
which raw request parameters narrow the result, and which names it can be
sorted by.  Parameter names are the camelCase names the API exposes and are
a contract: in particular ``batchName`` (substring) and ``exactBatchName``
(equality) must keep their distinct semantics.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from chemsonlab.domain.models.enums import EntityKind
from chemsonlab.infrastructure.persistence import models as orm
from chemsonlab.infrastructure.query import (
    FilterSet,
    LoadSpec,
    QuerySpec,
    SortKey,
    SortSet,
    contains,
    equals,
    exact,
    parsers,
    same_day,
)

PRODUCT = QuerySpec(
    orm.Product,
    filters=FilterSet(
        exact("name", "name"),
        equals("status", "status", parsers.boolean),
    ),
    sorts=SortSet(SortKey("name", "name")),
)

MACHINE = QuerySpec(
    orm.Machine,
    filters=FilterSet(
        contains("name", "name"),
        equals("status", "status", parsers.boolean),
    ),
    sorts=SortSet(SortKey("name", "name")),
)

CUSTOMER = QuerySpec(
    orm.Customer,
    filters=FilterSet(
        contains("name", "name"),
        equals("status", "status", parsers.boolean),
    ),
    sorts=SortSet(SortKey("name", "name")),
)

PRODUCT_SPECIFICATION = QuerySpec(
    orm.ProductSpecification,
    load=LoadSpec("product", "machine"),
    filters=FilterSet(
        exact("productName", "product.name"),
        contains("machineName", "machine.name"),
        equals("inUse", "in_use", parsers.boolean),
    ),
    sorts=SortSet(
        SortKey("productName", "product.name"),
        SortKey("machineName", "machine.name"),
    ),
)

CUSTOMER_ORDER = QuerySpec(
    orm.CustomerOrder,
    load=LoadSpec("customer", "product"),
    filters=FilterSet(
        contains("customerName", "customer.name"),
        contains("productName", "product.name"),
        equals("status", "status", parsers.boolean),
    ),
    sorts=SortSet(
        SortKey("customerName", "customer.name"),
        SortKey("productName", "product.name"),
    ),
)

TEST_RESULT = QuerySpec(
    orm.TestResult,
    load=LoadSpec("product", "machine"),
)

MEASUREMENT = QuerySpec(
    orm.Measurement,
    load=LoadSpec("test_result.product", "test_result.machine"),
    filters=FilterSet(equals("testResultId", "test_result_id", parsers.integer)),
)

EVALUATION = QuerySpec(
    orm.Evaluation,
    load=LoadSpec("test_result.product", "test_result.machine"),
    filters=FilterSet(
        equals("testResultId", "test_result_id", parsers.integer),
        equals("pointName", "point_name", parsers.char),
    ),
)

BATCH = QuerySpec(
    orm.Batch,
    load=LoadSpec("product"),
    filters=FilterSet(
        contains("batchName", "batch_name"),
        exact("productName", "product.name"),
        exact("suffix", "suffix"),
    ),
    sorts=SortSet(
        SortKey("batchName", "batch_name"),
        SortKey("productName", "product.name"),
    ),
)

BATCH_TEST_RESULT = QuerySpec(
    orm.BatchTestResult,
    load=LoadSpec("batch.product", "test_result.product", "test_result.machine"),
    filters=FilterSet(
        exact("productName", "test_result.product.name"),
        contains("batchName", "batch.batch_name"),
        exact("exactBatchName", "batch.batch_name"),
        same_day("testDate", "test_result.test_date"),
        exact("batchGroup", "test_result.batch_group"),
        equals("testNumber", "test_result.test_number", parsers.integer),
        contains("machineName", "test_result.machine.name"),
        equals("testResultId", "test_result_id", parsers.integer),
    ),
    sorts=SortSet(
        SortKey("testDate", "test_result.test_date"),
        SortKey("productName", "test_result.product.name"),
        SortKey("batchName", "batch.batch_name"),
        SortKey("testNumber", "test_result.test_number"),
    ),
)

REPORT = QuerySpec(
    orm.Report,
    filters=FilterSet(
        contains("createBy", "create_by"),
        same_day("createDate", "create_date"),
        equals("status", "status", parsers.boolean),
    ),
)

TEST_RESULT_REPORT = QuerySpec(
    orm.TestResultReport,
    load=LoadSpec(
        "report",
        "batch_test_result.batch",
        "batch_test_result.test_result.product",
    ),
    filters=FilterSet(
        contains("createBy", "report.create_by"),
        same_day("createDate", "report.create_date"),
        contains("productName", "batch_test_result.test_result.product.name"),
        contains("batchName", "batch_test_result.batch.batch_name"),
        equals("batchTestResultId", "batch_test_result_id", parsers.integer),
        exact("exactBatchName", "batch_test_result.batch.batch_name"),
        equals("result", "result", parsers.boolean),
    ),
    sorts=SortSet(
        SortKey("createDate", "report.create_date"),
        SortKey("productName", "batch_test_result.test_result.product.name"),
        SortKey("batchName", "batch_test_result.batch.batch_name"),
    ),
)

COA = QuerySpec(
    orm.Coa,
    load=LoadSpec("product"),
    filters=FilterSet(
        exact("productName", "product.name"),
        contains("batchName", "batch_name"),
    ),
    sorts=SortSet(
        SortKey("productName", "product.name"),
        SortKey("batchName", "batch_name"),
    ),
)

QC_LABEL = QuerySpec(
    orm.QcLabel,
    load=LoadSpec("product"),
    filters=FilterSet(
        exact("batchName", "batch_name"),
        exact("productName", "product.name"),
        equals("printed", "printed", parsers.boolean),
        exact("year", "year"),
        exact("month", "month"),
    ),
)

_KPI_FILTERS = (
    ("productName", "product.name"),
    ("machineName", "machine.name"),
    ("year", "year"),
    ("month", "month"),
)

QC_PERFORMANCE_KPI = QuerySpec(
    orm.QcPerformanceKpi,
    load=LoadSpec("product", "machine"),
    filters=FilterSet(*(exact(name, field) for name, field in _KPI_FILTERS)),
    sorts=SortSet(*(SortKey(name, field) for name, field in _KPI_FILTERS)),
)

QC_AVE_TEST_TIME_KPI = QuerySpec(
    orm.QcAveTestTimeKpi,
    load=LoadSpec("product", "machine"),
    filters=FilterSet(*(exact(name, field) for name, field in _KPI_FILTERS)),
    sorts=SortSet(*(SortKey(name, field) for name, field in _KPI_FILTERS)),
)

DAILY_QC = QuerySpec(
    orm.DailyQc,
    load=LoadSpec("product"),
    filters=FilterSet(
        equals("id", "id", parsers.integer),
        exact("productName", "product.name"),
        same_day("incomingDate", "incoming_date"),
        same_day("testedDate", "tested_date"),
        exact("testStatus", "test_status"),
        exact("year", "year"),
        exact("month", "month"),
    ),
    sorts=SortSet(
        SortKey("productName", "product.name"),
        SortKey("incomingDate", "incoming_date"),
        SortKey("testedDate", "tested_date"),
        SortKey("testStatus", "test_status"),
    ),
)

QUERY_SPECS: Mapping[EntityKind, QuerySpec] = MappingProxyType(
    {
        EntityKind.PRODUCT: PRODUCT,
        EntityKind.MACHINE: MACHINE,
        EntityKind.CUSTOMER: CUSTOMER,
        EntityKind.PRODUCT_SPECIFICATION: PRODUCT_SPECIFICATION,
        EntityKind.CUSTOMER_ORDER: CUSTOMER_ORDER,
        EntityKind.TEST_RESULT: TEST_RESULT,
        EntityKind.MEASUREMENT: MEASUREMENT,
        EntityKind.EVALUATION: EVALUATION,
        EntityKind.BATCH: BATCH,
        EntityKind.BATCH_TEST_RESULT: BATCH_TEST_RESULT,
        EntityKind.REPORT: REPORT,
        EntityKind.TEST_RESULT_REPORT: TEST_RESULT_REPORT,
        EntityKind.COA: COA,
        EntityKind.QC_LABEL: QC_LABEL,
        EntityKind.QC_PERFORMANCE_KPI: QC_PERFORMANCE_KPI,
        EntityKind.QC_AVE_TEST_TIME_KPI: QC_AVE_TEST_TIME_KPI,
        EntityKind.DAILY_QC: DAILY_QC,
    }
)
