from pathlib import Path

from pydantic_settings import BaseSettings

BACKEND_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    model_config = {"env_prefix": "", "case_sensitive": False}

    # App
    app_name: str = "Solar Savings Estimator"
    cors_origins: str = "*"

    # Logging
    log_json: bool = False

    # Static content
    frontend_path: Path = BACKEND_DIR / "public" / "index.html"
    assets_dir: Path = BACKEND_DIR / "assets"

    # Estimator
    panel_watt_default: float = 400.0
    # Optional month,ghi,dhi CSV replacing the built-in irradiance tables
    irradiance_dataset: Path | None = None


settings = Settings()
