from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # NEIS open-data meal service
    neis_api_url: str = "https://open.neis.go.kr/hub/mealServiceDietInfo"
    office_code: str = "J10"  # ATPT_OFCDC_SC_CODE (Gyeonggi)
    school_code: str = "7530079"  # SD_SCHUL_CODE
    neis_api_key: Optional[str] = None  # Works without a key at sample rate limits

    # CORS proxy wrapped around the upstream URL
    proxy_url: str = "https://api.allorigins.win/raw?url="
    use_proxy: bool = True

    # NEIS answers INFO-200 when a day has no meals
    no_data_as_empty: bool = False

    log_level: str = "INFO"

    class Config:
        env_prefix = "MEAL_"
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
