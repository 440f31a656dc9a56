"""Domain enumerations for the laboratory data layer.

String-valued enums use the str mixin so they compare equal to plain strings
(handy when the kind arrives as a path segment or query parameter).
"""

from enum import Enum


class EntityKind(str, Enum):
    PRODUCT = "product"
    MACHINE = "machine"
    CUSTOMER = "customer"
    PRODUCT_SPECIFICATION = "product_specification"
    CUSTOMER_ORDER = "customer_order"
    TEST_RESULT = "test_result"
    MEASUREMENT = "measurement"
    EVALUATION = "evaluation"
    BATCH = "batch"
    BATCH_TEST_RESULT = "batch_test_result"
    REPORT = "report"
    TEST_RESULT_REPORT = "test_result_report"
    COA = "coa"
    QC_LABEL = "qc_label"
    QC_PERFORMANCE_KPI = "qc_performance_kpi"
    QC_AVE_TEST_TIME_KPI = "qc_ave_test_time_kpi"
    DAILY_QC = "daily_qc"
