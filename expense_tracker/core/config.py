from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List


class Config(BaseSettings):
    # Database Configuration
    db_url: str = Field(
        default="sqlite+aiosqlite:///./expenses.db", alias="DB_URL"
    )
    auto_create_tables: bool = Field(default=True, alias="AUTO_CREATE_TABLES")

    # Runtime
    environment: str = Field(default="development", alias="ENVIRONMENT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    host: str = Field(default="127.0.0.1", alias="HOST")
    port: int = Field(default=8000, alias="PORT")

    # Comma-separated list of allowed origins for the browser UI
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Path to .env file (for loading env vars)
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        populate_by_name = True
        extra = "ignore"


# Instantiate the settings
config = Config()
