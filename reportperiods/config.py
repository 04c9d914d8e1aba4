import os
from functools import lru_cache

SUPPORTED_LANGUAGES = ("de", "en")


class Settings:
    def __init__(self, language: str) -> None:
        self.language = language


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    language = os.getenv("REPORTPERIODS_LANGUAGE", "de").strip().lower()
    if language not in SUPPORTED_LANGUAGES:
        raise ValueError(
            f"Unsupported label language: {language}. Use one of {', '.join(SUPPORTED_LANGUAGES)}"
        )
    return Settings(language=language)
