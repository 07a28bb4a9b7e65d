from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Config files
    config_dir: str = "config"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True
    log_file: str = "logs/modconfig.log"

    model_config = {"env_file": ".env"}
