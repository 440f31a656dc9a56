"""Shared fixtures: an in-memory SQLite database with the full schema.

`lab` seeds a small but complete data set through its own session and
commits it, so tests query it through a fresh `session` with an empty
identity map (nothing is pre-loaded by the seeding).
"""

from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from chemsonlab.infrastructure import persistence as orm
from chemsonlab.infrastructure.database import Base


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


def _rows():
    jan15 = datetime(2024, 1, 15, 8, 30)
    return [
        # Reference
        orm.Product(id=1, name="PVC-100", status=True, colour="white"),
        orm.Product(id=2, name="PVC-200", status=False),
        orm.Product(id=3, name="CPVC-300", status=True),
        orm.Product(id=4, name="Acme Batch", status=True),
        orm.Product(id=5, name="Acme Batch Extra", status=False),
        orm.Machine(id=1, name="Rheo-1", status=True),
        orm.Machine(id=2, name="Rheo-2", status=False),
        orm.Machine(id=3, name="Acme Batch", status=True),
        orm.Machine(id=4, name="Acme Batch Extra", status=False),
        orm.Customer(id=1, name="Acme Corp", email="lab@acme.test", status=True),
        orm.Customer(id=2, name="Beta Ltd", email="qc@beta.test", status=False),
        # Orders
        orm.CustomerOrder(id=1, customer_id=1, product_id=1, status=True),
        orm.CustomerOrder(id=2, customer_id=2, product_id=2, status=False),
        orm.CustomerOrder(id=3, customer_id=1, product_id=3, status=True),
        orm.ProductSpecification(id=1, product_id=1, machine_id=1, in_use=True, temp=180),
        orm.ProductSpecification(id=2, product_id=2, machine_id=2, in_use=False, temp=175),
        # Testing
        orm.TestResult(
            id=1, product_id=1, machine_id=1, test_date=jan15,
            batch_group="G1", test_number=1, operator_name="alice",
        ),
        orm.TestResult(
            id=2, product_id=1, machine_id=2, test_date=datetime(2024, 1, 15, 17, 45),
            batch_group="G1", test_number=2,
        ),
        orm.TestResult(
            id=3, product_id=2, machine_id=1, test_date=datetime(2024, 2, 1, 10, 0),
            batch_group="G2", test_number=1,
        ),
        orm.TestResult(
            id=4, product_id=3, machine_id=2, test_date=datetime(2024, 2, 3, 9, 0),
            batch_group="G3", test_number=None,
        ),
        orm.Measurement(id=1, test_result_id=1, time_act=timedelta(seconds=0), torque=1.5),
        orm.Measurement(id=2, test_result_id=1, time_act=timedelta(minutes=90), torque=2.5),
        orm.Measurement(id=3, test_result_id=2, time_act=timedelta(seconds=30), torque=3.0),
        orm.Evaluation(
            id=1, test_result_id=1, point_name="A",
            time_eval=timedelta(seconds=12), time_range=timedelta(seconds=2),
        ),
        orm.Evaluation(
            id=2, test_result_id=1, point_name="B",
            time_eval=timedelta(seconds=40), time_range=timedelta(seconds=5),
        ),
        orm.Evaluation(
            id=3, test_result_id=2, point_name="A",
            time_eval=timedelta(seconds=15), time_range=timedelta(seconds=3),
        ),
        # Batches
        orm.Batch(id=1, product_id=1, batch_name="Batch-001", suffix="A"),
        orm.Batch(id=2, product_id=1, batch_name="Batch-001-R", suffix="R"),
        orm.Batch(id=3, product_id=2, batch_name="Batch-002"),
        orm.Batch(id=4, product_id=3, batch_name="batch-777"),
        orm.BatchTestResult(id=1, batch_id=1, test_result_id=1),
        orm.BatchTestResult(id=2, batch_id=2, test_result_id=2),
        orm.BatchTestResult(id=3, batch_id=3, test_result_id=3),
        orm.BatchTestResult(id=4, batch_id=4, test_result_id=4),
        orm.Coa(id=1, product_id=1, batch_name="Batch-001"),
        orm.Coa(id=2, product_id=2, batch_name="Batch-002"),
        # Reports
        orm.Report(id=1, create_by="alice", create_date=datetime(2024, 1, 16, 9, 0), status=True),
        orm.Report(id=2, create_by="Bob", create_date=datetime(2024, 2, 4, 14, 0), status=False),
        orm.TestResultReport(id=1, report_id=1, batch_test_result_id=1, result=True),
        orm.TestResultReport(id=2, report_id=1, batch_test_result_id=2, result=False),
        orm.TestResultReport(id=3, report_id=2, batch_test_result_id=3, result=True),
        orm.TestResultReport(id=4, report_id=None, batch_test_result_id=None, result=None),
        # QC
        orm.QcLabel(id=1, batch_name="Batch-001", printed=True, product_id=1, year="2024", month="01"),
        orm.QcLabel(id=2, batch_name="Batch-002", printed=False, product_id=2, year="2024", month="02"),
        orm.QcPerformanceKpi(
            id=1, product_id=1, machine_id=1, year="2024", month="01",
            total_test=10, first_pass=8, second_pass=1, third_pass=1,
        ),
        orm.QcPerformanceKpi(
            id=2, product_id=2, machine_id=2, year="2024", month="02",
            total_test=4, first_pass=4, second_pass=0, third_pass=0,
        ),
        orm.QcAveTestTimeKpi(
            id=1, product_id=1, machine_id=1, year="2024", month="01",
            total_test=10, ave_test_time=540,
        ),
        orm.QcAveTestTimeKpi(
            id=2, product_id=2, machine_id=2, year="2023", month="12",
            total_test=3, ave_test_time=600,
        ),
        orm.DailyQc(
            id=1, incoming_date=datetime(2024, 1, 15, 7, 0), product_id=1,
            test_status="Tested", tested_date=jan15, year="2024", month="01",
        ),
        orm.DailyQc(
            id=2, incoming_date=datetime(2024, 1, 16, 7, 0), product_id=2,
            test_status="Pending", year="2024", month="01",
        ),
    ]


@pytest_asyncio.fixture
async def lab(session_factory):
    """Seed the database and return handy reference values."""
    async with session_factory() as seed:
        seed.add_all(_rows())
        await seed.commit()
    return SimpleNamespace(jan15=datetime(2024, 1, 15, 8, 30))
