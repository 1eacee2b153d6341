from __future__ import annotations

from typing import NamedTuple

from snowflake_id.errors import FieldOverflow

TIMESTAMP_BITS = 41
WORKER_ID_BITS = 10
SEQUENCE_BITS = 12

MAX_TIMESTAMP = (1 << TIMESTAMP_BITS) - 1
MAX_WORKER_ID = (1 << WORKER_ID_BITS) - 1
MAX_SEQUENCE = (1 << SEQUENCE_BITS) - 1

WORKER_ID_SHIFT = SEQUENCE_BITS
TIMESTAMP_SHIFT = SEQUENCE_BITS + WORKER_ID_BITS


class Snowflake(NamedTuple):
    """Decoded fields of a snowflake id.

    Fields are ordered as they are packed (most significant first), so
    comparing two values gives the same result as comparing their ids.
    """

    timestamp: int
    worker_id: int
    sequence: int

    @classmethod
    def parse(cls, id_: int) -> Snowflake:
        return decode(id_)

    def to_id(self) -> int:
        return encode(self.timestamp, self.worker_id, self.sequence)

    def __int__(self) -> int:
        return self.to_id()

    def __str__(self) -> str:
        return str(self.to_id())


def _check_field(field: str, value: int, max_value: int) -> None:
    if not 0 <= value <= max_value:
        raise FieldOverflow(field, value, max_value)


def encode(timestamp_ms: int, worker_id: int, sequence: int) -> int:
    _check_field("timestamp", timestamp_ms, MAX_TIMESTAMP)
    _check_field("worker_id", worker_id, MAX_WORKER_ID)
    _check_field("sequence", sequence, MAX_SEQUENCE)
    return (
        (timestamp_ms << TIMESTAMP_SHIFT)
        | (worker_id << WORKER_ID_SHIFT)
        | sequence
    )


def decode(id_: int) -> Snowflake:
    # masking only, so any bit pattern decodes
    return Snowflake(
        timestamp=(id_ >> TIMESTAMP_SHIFT) & MAX_TIMESTAMP,
        worker_id=(id_ >> WORKER_ID_SHIFT) & MAX_WORKER_ID,
        sequence=id_ & MAX_SEQUENCE,
    )
