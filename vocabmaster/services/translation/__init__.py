"""Translation provider abstraction layer."""

from vocabmaster.services.translation.base import TranslationProvider, TranslationProviderType
from vocabmaster.services.translation.google import GoogleTranslateProvider
from vocabmaster.services.translation.libretranslate import LibreTranslateProvider
from vocabmaster.services.translation.service import TranslationService
from vocabmaster.services.translation.static import StaticTranslationProvider

__all__ = [
    # Service
    "TranslationService",
    # Providers
    "TranslationProvider",
    "TranslationProviderType",
    "GoogleTranslateProvider",
    "LibreTranslateProvider",
    "StaticTranslationProvider",
]
