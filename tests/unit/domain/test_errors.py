"""Tests for chemsonlab/domain/errors.py — error hierarchy."""

import asyncio

from chemsonlab.domain.errors import FormatError, StoreCancelledError, StoreError


def test_store_cancelled_is_a_store_error():
    assert issubclass(StoreCancelledError, StoreError)


def test_store_cancelled_is_still_a_cancellation():
    assert issubclass(StoreCancelledError, asyncio.CancelledError)


def test_format_error_is_a_value_error():
    assert issubclass(FormatError, ValueError)


def test_store_error_is_not_a_value_error():
    assert not issubclass(StoreError, ValueError)
