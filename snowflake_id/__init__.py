from snowflake_id.codec import (
    MAX_SEQUENCE,
    MAX_TIMESTAMP,
    MAX_WORKER_ID,
    SEQUENCE_BITS,
    TIMESTAMP_BITS,
    WORKER_ID_BITS,
    Snowflake,
    decode,
    encode,
)
from snowflake_id.config import DEFAULT_EPOCH, Config
from snowflake_id.errors import (
    ClockMovedBackward,
    FieldOverflow,
    InvalidWorkerId,
    SnowflakeError,
)
from snowflake_id.generator import SnowflakeIdGenerator
from snowflake_id.util import setup_logger
