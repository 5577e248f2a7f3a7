from datetime import date

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "FINCALC_"}

    # App
    app_title: str = "Financial Calculators"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Loans without an explicit start date are scheduled from here
    default_start_date: date = date(2026, 1, 1)


settings = Settings()
