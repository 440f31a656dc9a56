"""Tests for chemsonlab/infrastructure/persistence/models — table metadata.

Checks the schema the query layer relies on: table names, id columns,
many-to-one relationships and nullability of optional foreign keys.
"""

import pytest
from sqlalchemy import BigInteger, Interval, inspect

from chemsonlab.infrastructure.database import Base
from chemsonlab.infrastructure.persistence import models as orm
from chemsonlab.infrastructure.persistence.models import __all__ as orm_all

EXPECTED_TABLES = {
    "products",
    "machines",
    "customers",
    "customer_orders",
    "product_specifications",
    "test_results",
    "measurements",
    "evaluations",
    "batches",
    "batch_test_results",
    "coas",
    "reports",
    "test_result_reports",
    "qc_labels",
    "qc_performance_kpis",
    "qc_ave_test_time_kpis",
    "daily_qcs",
}


def test_orm_package_exports_17_models():
    assert len(orm_all) == 17


def test_all_tables_registered_with_metadata():
    assert EXPECTED_TABLES <= set(Base.metadata.tables)


@pytest.mark.parametrize("name", orm_all)
def test_every_model_has_an_integer_id_primary_key(name):
    (pk,) = inspect(getattr(orm, name)).primary_key
    assert pk.name == "id"


@pytest.mark.parametrize("name", orm_all)
def test_relationships_are_many_to_one(name):
    for rel in inspect(getattr(orm, name)).relationships:
        assert rel.direction.name == "MANYTOONE"


def test_measurement_id_is_64_bit():
    assert isinstance(orm.Measurement.__table__.c.id.type, BigInteger)


def test_durations_are_intervals():
    assert isinstance(orm.Measurement.__table__.c.time_act.type, Interval)
    assert isinstance(orm.Evaluation.__table__.c.time_eval.type, Interval)
    assert isinstance(orm.Evaluation.__table__.c.time_range.type, Interval)


def test_test_result_report_foreign_keys_are_optional():
    columns = orm.TestResultReport.__table__.c
    assert columns.report_id.nullable
    assert columns.batch_test_result_id.nullable


def test_batch_test_result_relationships():
    keys = {rel.key for rel in inspect(orm.BatchTestResult).relationships}
    assert keys == {"batch", "test_result"}
