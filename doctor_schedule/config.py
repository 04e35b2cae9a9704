#config.py
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)
    # Application Settings
    APP_NAME: str = "Doctor Schedule Viewer"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # View data fetch (simulated backend round trip)
    SIMULATED_FETCH_LATENCY_MS: int = 0

    # Doctor shown when the viewer starts
    DEFAULT_DOCTOR_ID: str = "doctor-1"

    @property
    def fetch_latency_seconds(self) -> float:
        return max(0, self.SIMULATED_FETCH_LATENCY_MS) / 1000


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings: Settings = get_settings()
