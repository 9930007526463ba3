# calsun/core/config.py
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "CalSun"
    API_V1_STR: str = "/api/v1"
    # Bind address for calsun-server
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"
    # Calendar feed window (days), default and upper bound
    DEFAULT_DAYS: int = 30
    MAX_DAYS: int = 90

    class Config:
        case_sensitive = True

settings = Settings()
