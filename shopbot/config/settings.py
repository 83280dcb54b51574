from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):

    chat_max_history_length: int = Field(default=50, ge=1)

    intent_patterns_path: str = "intent_patterns.json"
    classifier_debug: bool = False

    products_path: str = "products.json"
    catalog_base_url: Optional[str] = None
    catalog_timeout: float = 5.0

    sessions_path: str = "./sessions"

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
