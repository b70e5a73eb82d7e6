from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "FAIRPRICE_"}

    # Dataset (empty = bundled fairprice/data/bairros.json)
    dataset_path: str = ""

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Dashboard
    theme: str = "dark"  # dark / light
    dashboard_port: int = 8050


settings = Settings()
