from typing import List

import pytest

from snowflake_id import DEFAULT_EPOCH


class FakeClock:
    def __init__(self, *values: int) -> None:
        self.set(*values)

    def set(self, *values: int) -> None:
        self._values: List[int] = list(values)

    def __call__(self) -> int:
        if len(self._values) > 1:
            return self._values.pop(0)
        return self._values[0]


@pytest.fixture
def clock():
    return FakeClock(DEFAULT_EPOCH + 1000)
