"""
UI string localization (English / Swahili).

The selected language is persisted in the same local key-value store
as the user record.
"""

from enum import Enum
from typing import Dict, MutableMapping, Optional

from shambago.common.logger import get_logger
from shambago.config import settings

logger = get_logger(__name__)


class Language(str, Enum):
    ENGLISH = "en"
    SWAHILI = "sw"

    @property
    def display_name(self) -> str:
        return {"en": "English", "sw": "Kiswahili"}[self.value]


TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "Welcome Back!": {"en": "Welcome Back!", "sw": "Karibu Tena!"},
    "Create Account": {"en": "Create Account", "sw": "Fungua Akaunti"},
    "Connect with farmers": {
        "en": "Connect with farmers and grow together",
        "sw": "Unganisha na wakulima na kukua pamoja",
    },
    "Email": {"en": "Email", "sw": "Barua pepe"},
    "Password": {"en": "Password", "sw": "Nywila"},
    "Full Name": {"en": "Full Name", "sw": "Jina Kamili"},
    "Sign In": {"en": "Sign In", "sw": "Ingia"},
    "Sign Out": {"en": "Sign Out", "sw": "Toka"},
    "Settings": {"en": "Settings", "sw": "Mipangilio"},
    "Language": {"en": "Language", "sw": "Lugha"},
    "Notifications": {"en": "Notifications", "sw": "Arifa"},
    "Privacy": {"en": "Privacy", "sw": "Faragha"},
    "Help Center": {"en": "Help Center", "sw": "Kituo cha Usaidizi"},
    "Contact Us": {"en": "Contact Us", "sw": "Wasiliana Nasi"},
    "About": {"en": "About", "sw": "Kuhusu"},
    "Quick Actions": {"en": "Quick Actions", "sw": "Vitendo vya Haraka"},
    "Scan Crop": {"en": "Scan Crop", "sw": "Chunguza Mazao"},
    "Crop Health": {"en": "Crop Health", "sw": "Afya ya Mazao"},
    "Analytics": {"en": "Analytics", "sw": "Uchambuzi"},
    "Alerts": {"en": "Alerts", "sw": "Arifa"},
}


class Localizer:
    """
    Looks up UI strings in the selected language.
    """

    def __init__(
        self,
        store: MutableMapping[str, str],
        key: Optional[str] = None,
    ):
        self.store = store
        self.key = key or settings.LANGUAGE_STORAGE_KEY
        self.language = self._read_language()

    def _read_language(self) -> Language:
        raw = self.store.get(self.key, settings.DEFAULT_LANGUAGE)

        try:
            return Language(raw)
        except ValueError:
            logger.warning(
                "Unknown stored language; using English",
                extra={"language": raw},
            )
            return Language.ENGLISH

    def set_language(self, language: Language) -> None:
        """Select and persist a language."""
        language = Language(language)
        self.store[self.key] = language.value
        self.language = language

        logger.info("Language changed", extra={"language": language.value})

    def translate(self, key: str) -> str:
        """
        Return the translation of ``key``, or ``key`` itself if none.
        """
        return TRANSLATIONS.get(key, {}).get(self.language.value, key)
