"""Fixtures for use case tests: an AsyncMock ledger store over a sample snapshot."""

from unittest.mock import AsyncMock

import pytest

from goldbook.core.entities import LedgerSnapshot


@pytest.fixture
def mock_store(sample_snapshot):
    store = AsyncMock()
    store.load_snapshot.return_value = sample_snapshot
    return store


@pytest.fixture
def saved_snapshot(mock_store):
    """The snapshot handed to the most recent save_snapshot call."""

    def _saved() -> LedgerSnapshot:
        mock_store.save_snapshot.assert_awaited()
        return mock_store.save_snapshot.call_args.args[0]

    return _saved
