class SnowflakeError(Exception):
    pass


class InvalidWorkerId(SnowflakeError, ValueError):
    pass


class FieldOverflow(SnowflakeError, ValueError):
    def __init__(self, field: str, value: int, max_value: int) -> None:
        super().__init__(
            f"{field} value must be between 0 and {max_value}, but got {value}"
        )
        self.field = field
        self.value = value
        self.max_value = max_value


class ClockMovedBackward(SnowflakeError):
    def __init__(self, last_timestamp: int, current_timestamp: int) -> None:
        super().__init__(
            f"Clock moved backwards. Refusing to generate id for {last_timestamp - current_timestamp} ms"
        )
        self.last_timestamp = last_timestamp
        self.current_timestamp = current_timestamp
