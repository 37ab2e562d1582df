import pytest
from pytest_mock import MockerFixture

from calendar_math.core.timing import log_timing
from calendar_math.date_utils import month_grid


def test_log_timing(mocker: MockerFixture) -> None:
    mock_logger = mocker.patch("calendar_math.core.timing.logger")

    @log_timing
    def add(a: int, b: int) -> int:
        return a + b

    assert add(1, 2) == 3
    assert add.__name__ == "add"

    bound = mock_logger.bind.call_args.kwargs
    assert bound["function"] == "test_log_timing.<locals>.add"
    assert bound["module"] == __name__

    mock_logger.bind.return_value.debug.assert_called_once()
    elapsed_ms = mock_logger.bind.return_value.debug.call_args.kwargs["elapsed_ms"]
    assert elapsed_ms >= 0


def test_log_timing_on_error(mocker: MockerFixture) -> None:
    mock_logger = mocker.patch("calendar_math.core.timing.logger")

    @log_timing
    def fail() -> None:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        fail()

    mock_logger.bind.return_value.debug.assert_called_once()


def test_month_grid_is_timed(mocker: MockerFixture) -> None:
    mock_logger = mocker.patch("calendar_math.core.timing.logger")

    month_grid(2025, 11)

    bound = mock_logger.bind.call_args.kwargs
    assert bound["function"] == "month_grid"
    assert bound["module"] == "calendar_math.date_utils"
