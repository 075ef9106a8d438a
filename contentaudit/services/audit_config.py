"""
Vocabulary and brand configuration injected into the content validators.
"""

from dataclasses import dataclass

from contentaudit.config import settings


@dataclass(frozen=True)
class AuditConfig:
    brand_token: str = "Mifty"
    primary_keywords: tuple[str, ...] = ("mifty", "nodejs", "typescript", "framework")
    action_words: tuple[str, ...] = (
        "build",
        "create",
        "develop",
        "discover",
        "learn",
        "start",
        "accelerate",
        "enhance",
    )
    generic_anchor_phrases: tuple[str, ...] = (
        "click here",
        "read more",
        "learn more",
        "here",
        "this",
        "link",
    )
    base_url: str = "https://mifty.dev"
    schema_context: str = "https://schema.org"

    @classmethod
    def from_settings(cls) -> "AuditConfig":
        return cls(
            brand_token=settings.BRAND_TOKEN,
            primary_keywords=tuple(settings.PRIMARY_KEYWORDS),
            action_words=tuple(settings.ACTION_WORDS),
            generic_anchor_phrases=tuple(settings.GENERIC_ANCHOR_PHRASES),
            base_url=settings.DEFAULT_BASE_URL,
            schema_context=settings.SCHEMA_CONTEXT_URL,
        )


def resolve_config(config: AuditConfig | None) -> AuditConfig:
    """Fall back to the settings-derived config when none is injected."""
    return config if config is not None else AuditConfig.from_settings()
