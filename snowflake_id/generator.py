from __future__ import annotations

import logging
import threading
import time
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from snowflake_id.codec import MAX_SEQUENCE, MAX_WORKER_ID, Snowflake, decode, encode
from snowflake_id.config import DEFAULT_EPOCH, Config
from snowflake_id.errors import ClockMovedBackward, InvalidWorkerId


def _current_millis() -> int:
    return int(time.time() * 1000)


class SnowflakeIdGenerator:
    """Issues strictly increasing snowflake ids for one worker.

    Safe to share between threads. Use one instance per worker id.
    """

    def __init__(
        self,
        worker_id: int,
        epoch: int = DEFAULT_EPOCH,
        clock: Callable[[], int] = _current_millis,
        wait_interval_second: float = 0.0001,
    ) -> None:
        if not 0 <= worker_id <= MAX_WORKER_ID:
            raise InvalidWorkerId(
                f"worker_id value must be between 0 and {MAX_WORKER_ID}, but got {worker_id}"
            )

        self.worker_id = worker_id
        self.epoch = epoch
        self.last_timestamp: Optional[int] = None
        self.sequence = 0

        self._clock = clock
        self._wait_interval_second = wait_interval_second
        self._lock = threading.Lock()
        self._logger = logging.getLogger(self.__class__.__name__)
        self._logger.debug(f"created for worker {worker_id} with epoch {epoch}")

    @classmethod
    def from_config(cls, config: Config, **kwargs) -> SnowflakeIdGenerator:
        return cls(
            worker_id=config.worker_id,
            epoch=config.epoch,
            wait_interval_second=config.wait_interval_second,
            **kwargs,
        )

    def __iter__(self) -> SnowflakeIdGenerator:
        return self

    def __next__(self) -> int:
        return self.next()

    def next(self) -> int:
        with self._lock:
            now = self.current_timestamp()
            if self.last_timestamp is not None and now < self.last_timestamp:
                self._logger.error(
                    f"clock moved backwards from {self.last_timestamp} to {now}"
                )
                raise ClockMovedBackward(self.last_timestamp, now)

            if now == self.last_timestamp:
                sequence = (self.sequence + 1) & MAX_SEQUENCE
                if sequence == 0:
                    self._logger.debug(
                        f"sequence exhausted at {now}. wait for the next millisecond"
                    )
                    now = self.wait_next_timestamp(now)
            else:
                sequence = 0

            id_ = encode(now, self.worker_id, sequence)
            self.last_timestamp = now
            self.sequence = sequence
            return id_

    def next_snowflake(self) -> Snowflake:
        return decode(self.next())

    def parse(self, id_: int) -> Snowflake:
        return decode(id_)

    def to_datetime(self, id_: int) -> datetime:
        timestamp = decode(id_).timestamp + self.epoch
        return datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(
            milliseconds=timestamp
        )

    def current_timestamp(self) -> int:
        return self._clock() - self.epoch

    def wait_next_timestamp(self, last_timestamp: int) -> int:
        timestamp = self.current_timestamp()
        while timestamp <= last_timestamp:
            time.sleep(self._wait_interval_second)
            timestamp = self.current_timestamp()
        return timestamp
