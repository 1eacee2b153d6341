import logging

from snowflake_id.config import Config


def setup_logger(config: Config) -> None:
    logging.basicConfig(
        format=config.log_format,
        datefmt="%Y-%m-%d %H:%M:%S",
        level=logging.DEBUG if config.verbose else logging.INFO,
    )
