from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    BACKEND_URL: str = "http://localhost:4001"
    BACKEND_TIMEOUT: int = 30

    SECRET_KEY: str = "CHANGE_ME"
    SESSION_COOKIE_NAME: str = "portal_session"
    SESSION_MAX_AGE_DAYS: int = 30
    COOKIE_SECURE: bool = False  # prod'da True

    WEBSITE_URL: Optional[str] = None
    ALLOWED_ORIGINS: List[str] = [
        "https://ssc-web-pearl.vercel.app",
        "http://localhost:3000",
        "http://localhost:3001",
        "http://localhost:6020",
    ]

    CONTENT_DIR: str = "content/prod"
    CONTENT_MAX_BYTES: int = 10 * 1024 * 1024

    # waiting page re-check interval
    STATUS_RECHECK_SECONDS: int = 30

    ENV: str = "local"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

    @property
    def SESSION_MAX_AGE_SECONDS(self) -> int:
        return self.SESSION_MAX_AGE_DAYS * 24 * 60 * 60

    @property
    def CORS_ORIGINS(self) -> List[str]:
        origins = list(self.ALLOWED_ORIGINS)
        if self.WEBSITE_URL and self.WEBSITE_URL not in origins:
            origins.append(self.WEBSITE_URL)
        return origins


settings = Settings()
