from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable

import pytest

from factories import BASE_TIME


@pytest.fixture()
def ticking_clock() -> Callable[[], datetime]:
    """Clock that advances one minute per call, so inserts get distinct created_at."""
    state = {"now": BASE_TIME}

    def tick() -> datetime:
        state["now"] += timedelta(minutes=1)
        return state["now"]

    return tick
