import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

# 2020-01-01T00:00:00Z in milliseconds
DEFAULT_EPOCH = 1577836800000


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SNOWFLAKE_")

    worker_id: int = 0
    epoch: int = DEFAULT_EPOCH
    wait_interval_second: float = 0.0001
    log_format: str = "%(asctime)s,%(msecs)03d %(levelname)-8s [%(filename)s:%(lineno)d] %(name)s - %(message)s"
    verbose: bool = False

    @classmethod
    def from_yaml(cls, yaml_path: str):
        with open(yaml_path) as f:
            data = yaml.load(f, Loader=yaml.FullLoader)
            return cls(**(data or {}))
