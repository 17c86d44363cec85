from datetime import datetime

import pytest


@pytest.fixture
def now():
    """Fixed clock: Monday 2024-01-15 09:42:07 local time."""
    return lambda: datetime(2024, 1, 15, 9, 42, 7)
