"""Production batches, their test runs and certificates of analysis."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .reference import Product
from .testing import TestResult


class Batch(BaseModel):
    """A production batch of a product.

    batch_name is the plant's batch code (e.g. "24A123"); suffix marks
    re-runs or split lots.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    product_id: int
    batch_name: str
    sample_by: str | None = None
    suffix: str | None = None

    product: Product | None = None


class BatchTestResult(BaseModel):
    """Association: which test run was performed on which batch."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    batch_id: int
    test_result_id: int

    batch: Batch | None = None
    test_result: TestResult | None = None


class Coa(BaseModel):
    """Certificate of analysis issued for a product batch."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    product_id: int
    batch_name: str

    product: Product | None = None
