"""ORM model registry: imports all layer modules so every mapper class is
registered with Base.metadata before SQLAlchemy configures relationships.

Import order follows the dependency graph (referenced tables first).
"""

from chemsonlab.infrastructure.persistence.models.reference import (
    Customer,
    Machine,
    Product,
)
from chemsonlab.infrastructure.persistence.models.orders import (
    CustomerOrder,
    ProductSpecification,
)
from chemsonlab.infrastructure.persistence.models.testing import (
    Evaluation,
    Measurement,
    TestResult,
)
from chemsonlab.infrastructure.persistence.models.batches import (
    Batch,
    BatchTestResult,
    Coa,
)
from chemsonlab.infrastructure.persistence.models.reports import (
    Report,
    TestResultReport,
)
from chemsonlab.infrastructure.persistence.models.qc import (
    DailyQc,
    QcAveTestTimeKpi,
    QcLabel,
    QcPerformanceKpi,
)

__all__ = [
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
