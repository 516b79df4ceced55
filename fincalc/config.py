from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Service-level settings. The calculation engine itself never reads these."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "FINCALC_"}

    # App
    app_title: str = "FinCalc"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]


settings = Settings()
