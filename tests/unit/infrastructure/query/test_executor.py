"""Tests for chemsonlab/infrastructure/query/executor.py — QuerySpec and execution."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from chemsonlab.domain.errors import StoreCancelledError, StoreError
from chemsonlab.infrastructure.persistence import models as orm
from chemsonlab.infrastructure.query import (
    FilterSet,
    LoadSpec,
    QuerySpec,
    SortKey,
    SortSet,
    contains,
    exact,
    execute,
    fetch_one,
    store_errors,
)


def _batch_spec():
    return QuerySpec(
        orm.Batch,
        load=LoadSpec("product"),
        filters=FilterSet(contains("batchName", "batch_name"), exact("productName", "product.name")),
        sorts=SortSet(SortKey("batchName", "batch_name")),
    )


def _failing_session(exc):
    session = AsyncMock()
    session.execute.side_effect = exc
    return session


# --- QuerySpec validation ---

def test_filter_through_unloaded_relationship_is_rejected():
    with pytest.raises(ValueError, match="product"):
        QuerySpec(orm.Batch, filters=FilterSet(exact("productName", "product.name")))


def test_sort_through_unloaded_relationship_is_rejected():
    with pytest.raises(ValueError, match="productName"):
        QuerySpec(orm.Batch, sorts=SortSet(SortKey("productName", "product.name")))


def test_own_columns_need_no_load():
    spec = QuerySpec(orm.Machine, filters=FilterSet(contains("name", "name")))
    assert spec.load.paths == ()


def test_primary_key_is_the_id_column():
    assert _batch_spec().primary_key.name == "id"


# --- statement composition ---

def test_statement_without_input_has_no_where_or_order():
    sql = str(_batch_spec().statement())
    assert "WHERE" not in sql
    assert "ORDER BY" not in sql


def test_statement_applies_filters_and_sort():
    sql = str(_batch_spec().statement({"batchName": "001"}, "batchName", False))
    assert "WHERE" in sql
    assert "ORDER BY batches.batch_name DESC NULLS LAST, batches.id DESC" in sql


def test_statement_ignores_unknown_sort_key():
    assert "ORDER BY" not in str(_batch_spec().statement(sort_by="colour"))


# --- store_errors ---

def test_store_errors_wraps_driver_errors():
    cause = OperationalError("SELECT 1", {}, Exception("connection refused"))
    with pytest.raises(StoreError) as info:
        with store_errors("Querying Batch"):
            raise cause
    assert info.value.__cause__ is cause
    assert "Querying Batch" in str(info.value)


@pytest.mark.parametrize("exc", [OSError("reset"), TimeoutError()])
def test_store_errors_wraps_io_failures(exc):
    with pytest.raises(StoreError):
        with store_errors("Querying Batch"):
            raise exc


def test_store_errors_turns_cancellation_into_store_cancelled():
    with pytest.raises(StoreCancelledError) as info:
        with store_errors("Querying Batch"):
            raise asyncio.CancelledError()
    assert isinstance(info.value, asyncio.CancelledError)


def test_store_errors_leaves_other_errors_alone():
    with pytest.raises(KeyError):
        with store_errors("Querying Batch"):
            raise KeyError("x")


# --- execute / fetch_one with a mocked session ---

async def test_execute_materializes_a_list():
    rows = [object(), object()]
    session = AsyncMock()
    session.execute.return_value = MagicMock(
        scalars=MagicMock(return_value=MagicMock(all=MagicMock(return_value=rows)))
    )
    result = await execute(session, _batch_spec())
    assert result == rows
    assert isinstance(result, list)


async def test_execute_raises_store_error_on_driver_failure():
    session = _failing_session(OperationalError("SELECT", {}, Exception("down")))
    with pytest.raises(StoreError):
        await execute(session, _batch_spec(), {"batchName": "001"})


async def test_execute_raises_store_error_on_timeout():
    with pytest.raises(StoreError):
        await execute(_failing_session(TimeoutError()), _batch_spec())


async def test_execute_raises_store_cancelled_on_cancellation():
    with pytest.raises(StoreCancelledError):
        await execute(_failing_session(asyncio.CancelledError()), _batch_spec())


async def test_timeout_around_execute_raises_timeout_error():
    async def _hang(*args, **kwargs):
        await asyncio.sleep(10)

    session = AsyncMock()
    session.execute.side_effect = _hang
    with pytest.raises(TimeoutError):
        async with asyncio.timeout(0.01):
            await execute(session, _batch_spec())
    assert asyncio.current_task().cancelling() == 0


async def test_bad_filter_input_never_reaches_the_error_path():
    session = AsyncMock()
    session.execute.return_value = MagicMock(
        scalars=MagicMock(return_value=MagicMock(all=MagicMock(return_value=[])))
    )
    assert await execute(session, _batch_spec(), {"nope": "x"}, "colour") == []


async def test_fetch_one_returns_none_when_absent():
    session = AsyncMock()
    session.execute.return_value = MagicMock(scalar_one_or_none=MagicMock(return_value=None))
    assert await fetch_one(session, _batch_spec(), orm.Batch.id == 99) is None


async def test_fetch_one_wraps_integrity_errors():
    session = _failing_session(IntegrityError("SELECT", {}, Exception("boom")))
    with pytest.raises(StoreError):
        await fetch_one(session, _batch_spec(), orm.Batch.id == 1)


# --- against SQLite ---

async def test_execute_returns_rows_with_related_entities(lab, session):
    rows = await execute(session, _batch_spec(), {"productName": "PVC-100"}, "batchName")
    assert [row.batch_name for row in rows] == ["Batch-001", "Batch-001-R"]
    assert all(row.product.name == "PVC-100" for row in rows)


async def test_fetch_one_loads_related_entities(lab, session):
    row = await fetch_one(session, _batch_spec(), orm.Batch.id == 3)
    assert row.product.name == "PVC-200"


async def test_execute_returns_a_fresh_list_each_call(lab, session):
    first = await execute(session, _batch_spec())
    second = await execute(session, _batch_spec())
    assert first == second
    assert first is not second
