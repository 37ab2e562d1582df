from datetime import date

import pytest


@pytest.fixture(
    params=[
        date(2024, 1, 1),
        date(2024, 2, 29),
        date(2024, 6, 15),
        date(2025, 12, 31),
        date(2026, 3, 1),
        date(2026, 10, 19),
    ]
)
def sample_date(request: pytest.FixtureRequest) -> date:
    return request.param
