"""Tests for the unit-of-work session provider."""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest

from la_motors.infra.db.session import get_session


@pytest.fixture()
def mock_session() -> Mock:
    session = Mock()
    with patch("la_motors.infra.db.session.get_session_local") as get_session_local:
        get_session_local.return_value = Mock(return_value=session)
        yield session


def test_commits_and_closes_on_success(mock_session: Mock) -> None:
    with get_session() as session:
        assert session is mock_session

    mock_session.commit.assert_called_once()
    mock_session.rollback.assert_not_called()
    mock_session.close.assert_called_once()


def test_rolls_back_and_reraises_on_error(mock_session: Mock) -> None:
    with pytest.raises(RuntimeError):
        with get_session():
            raise RuntimeError("boom")

    mock_session.commit.assert_not_called()
    mock_session.rollback.assert_called_once()
    mock_session.close.assert_called_once()
