import os
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    app_name: str = "Quiz API"
    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 3000
    api_prefix: str = "/api"

    # Full connection string wins over the postgres_* parts
    database_url: Optional[str] = None
    postgres_user: str = os.getenv("POSTGRES_USER", "user")
    postgres_password: str = os.getenv("POSTGRES_PASSWORD", "password")
    postgres_db: str = os.getenv("POSTGRES_DB", "quizsystem")
    postgres_host: str = os.getenv("POSTGRES_HOST", "localhost")
    postgres_port: int = 5432
    db_connect_timeout: int = 5
    db_retry_delay: float = 5.0

    @property
    def sqlalchemy_database_url(self) -> str:
        url = self.database_url or f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        # psycopg2 is the installed driver; pin it for bare postgres URLs
        for prefix in ("postgresql://", "postgres://"):
            if url.startswith(prefix):
                return "postgresql+psycopg2://" + url[len(prefix):]
        return url

    jwt_secret: str = "secretkey"
    algorithm: str = "HS256"
    access_token_expire_hours: int = 24
    bcrypt_rounds: int = 10

    cors_origins_str: str = "*"

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]

    random_question_count: int = 10

    slow_request_threshold: float = 1.0
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
