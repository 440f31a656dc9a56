"""Domain model package.

Import from here rather than individual modules.
"""

from .batches import Batch, BatchTestResult, Coa
from .enums import EntityKind
from .orders import CustomerOrder, ProductSpecification
from .qc import DailyQc, QcAveTestTimeKpi, QcLabel, QcPerformanceKpi
from .reference import Customer, Machine, Product
from .reports import Report, TestResultReport
from .testing import Evaluation, Measurement, TestResult

__all__ = [
    # Enums
    "EntityKind",
    # Reference
    "Product",
    "Machine",
    "Customer",
    # Orders
    "CustomerOrder",
    "ProductSpecification",
    # Testing
    "TestResult",
    "Measurement",
    "Evaluation",
    # Batches
    "Batch",
    "BatchTestResult",
    "Coa",
    # Reports
    "Report",
    "TestResultReport",
    # QC
    "QcLabel",
    "QcPerformanceKpi",
    "QcAveTestTimeKpi",
    "DailyQc",
]
