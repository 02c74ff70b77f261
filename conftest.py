from datetime import datetime

import pytest


@pytest.fixture
def fixed_now() -> datetime:
    # Monday 2026-02-02 09:05 local time
    return datetime(2026, 2, 2, 9, 5, 0)
