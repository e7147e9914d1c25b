from pydantic_settings import BaseSettings
from typing import List, Optional, Union
from pydantic import Field, field_validator, model_validator
import json
import os


DEV_SESSION_SECRET = "a-very-long-secret-for-dev-at-least-32-chars"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # API Settings
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Jobtica Portal API"
    ENVIRONMENT: str = "development"
    PORT: int = 3001

    # Serverless platforms import the app instead of running a listener
    SERVERLESS: bool = False

    # Database Settings
    # DATABASE_URL wins when set; otherwise it is built from the discrete parts
    DATABASE_URL_OVERRIDE: Optional[str] = Field(default=None, validation_alias="DATABASE_URL")
    POSTGRES_USER: str = "user"
    POSTGRES_PASSWORD: str = "password"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: str = "5432"
    POSTGRES_DB: str = "jobtica"

    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 0
    DB_POOL_TIMEOUT: int = 2
    DB_AUTO_CREATE: bool = False

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return f"postgresql+psycopg2://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # Session cookie
    SESSION_SECRET: str = ""
    SESSION_COOKIE_NAME: str = "jobtica-session"
    SESSION_ALGORITHM: str = "HS256"
    SESSION_MAX_AGE_SECONDS: int = 60 * 60 * 24 * 14

    # Logging
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = False

    # AWS SES (outbound email)
    EMAIL_DELIVERY_ENABLED: bool = False
    AWS_REGION: str = "us-east-1"
    AWS_ACCESS_KEY_ID: str = ""
    AWS_SECRET_ACCESS_KEY: str = ""
    AWS_SES_FROM_EMAIL: str = "noreply@jobtica.com"
    AWS_SES_FROM_NAME: str = "Jobtica"

    # CORS Settings - can be set as JSON string in .env
    BACKEND_CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000", "http://localhost:5173"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Union[List[str], str]) -> List[str]:
        """Parse CORS origins from JSON string or list"""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # If not valid JSON, split by comma
                return [origin.strip() for origin in v.split(",")]
        return v

    @model_validator(mode="after")
    def check_session_secret(self) -> "Settings":
        """Production must bring its own secret; development falls back to a fixed one."""
        if not self.SESSION_SECRET:
            if self.is_production:
                raise ValueError(
                    "SESSION_SECRET environment variable is not set for production. "
                    "It must be at least 32 characters long."
                )
            self.SESSION_SECRET = DEV_SESSION_SECRET
        elif self.is_production and len(self.SESSION_SECRET) < 32:
            raise ValueError("SESSION_SECRET must be at least 32 characters long.")
        return self

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def should_listen(self) -> bool:
        """Long-running listener mode unless a serverless platform owns the process."""
        if not self.is_production:
            return True
        return not (self.SERVERLESS or os.getenv("VERCEL") or os.getenv("FUNCTION_TARGET"))

    class Config:
        env_file = ".env"
        case_sensitive = True
        populate_by_name = True


settings = Settings()
