from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    PROJECT_NAME: str = "ContentAudit"
    VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"

    API_V1_STR: str = "/api/v1"

    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:3011"

    LOG_LEVEL: str = "INFO"

    # Brand and vocabulary used by the content validators
    BRAND_TOKEN: str = "Mifty"
    PRIMARY_KEYWORDS: List[str] = ["mifty", "nodejs", "typescript", "framework"]
    ACTION_WORDS: List[str] = [
        "build",
        "create",
        "develop",
        "discover",
        "learn",
        "start",
        "accelerate",
        "enhance",
    ]
    GENERIC_ANCHOR_PHRASES: List[str] = [
        "click here",
        "read more",
        "learn more",
        "here",
        "this",
        "link",
    ]

    # Links starting with this prefix (or "/") count as internal
    DEFAULT_BASE_URL: str = "https://mifty.dev"
    SCHEMA_CONTEXT_URL: str = "https://schema.org"

    # Site audits with a lower average score fail
    SITE_AUDIT_PASS_THRESHOLD: int = 70

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def cors_origins_list(self) -> List[str]:
        if isinstance(self.CORS_ORIGINS, str):
            return [o.strip() for o in self.CORS_ORIGINS.split(",")]
        return self.CORS_ORIGINS


settings = Settings()
