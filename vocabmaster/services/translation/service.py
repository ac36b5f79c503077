"""Translation service with provider management and automatic fallback."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vocabmaster.core.config import get_settings
from vocabmaster.services.translation.base import TranslationProvider, TranslationProviderType
from vocabmaster.services.translation.google import GoogleTranslateProvider
from vocabmaster.services.translation.libretranslate import LibreTranslateProvider
from vocabmaster.services.translation.static import StaticTranslationProvider

if TYPE_CHECKING:
    from vocabmaster.core.config import Settings

logger = logging.getLogger(__name__)


class TranslationService(TranslationProvider):
    """
    Translation provider that chains a primary and a fallback provider.

    The fallback is consulted only when the primary returns nothing, so callers
    can treat the whole chain as a single ``TranslationProvider``.
    """

    provider_name = "translation_service"

    def __init__(
        self,
        settings: Settings | None = None,
        primary_provider: TranslationProvider | None = None,
        fallback_provider: TranslationProvider | None = None,
    ) -> None:
        """
        Initialize the translation service.

        Args:
            settings: Application settings. If not provided, will load from environment.
            primary_provider: Override primary provider instance.
            fallback_provider: Override fallback provider instance.
        """
        self.settings = settings or get_settings()
        self._primary_provider = primary_provider
        self._fallback_provider = fallback_provider
        self._providers: dict[str, TranslationProvider] = {}

    def _create_provider(self, provider_type: str) -> TranslationProvider | None:
        source = self.settings.translation_source_language
        target = self.settings.translation_target_language
        timeout = float(self.settings.http_timeout_seconds)

        if provider_type == TranslationProviderType.GOOGLE.value:
            return GoogleTranslateProvider(
                source_language=source,
                target_language=target,
                base_url=self.settings.google_translate_url,
                timeout=timeout,
            )
        elif provider_type == TranslationProviderType.LIBRETRANSLATE.value:
            return LibreTranslateProvider(
                source_language=source,
                target_language=target,
                base_url=self.settings.libretranslate_url,
                api_key=self.settings.libretranslate_api_key or None,
                timeout=timeout,
            )
        elif provider_type == TranslationProviderType.STATIC.value:
            return StaticTranslationProvider(target_language=target)
        else:
            logger.error(f"[TranslationService] Unknown provider type: {provider_type}")
            return None

    def get_provider(self, provider_type: str) -> TranslationProvider | None:
        """Get or create a provider instance."""
        if provider_type not in self._providers:
            provider = self._create_provider(provider_type)
            if provider:
                self._providers[provider_type] = provider
        return self._providers.get(provider_type)

    @property
    def primary_provider(self) -> TranslationProvider | None:
        """Get the primary provider instance."""
        if self._primary_provider:
            return self._primary_provider
        return self.get_provider(self.settings.translation_primary_provider)

    @property
    def fallback_provider(self) -> TranslationProvider | None:
        """Get the fallback provider instance."""
        if self._fallback_provider:
            return self._fallback_provider
        return self.get_provider(self.settings.translation_fallback_provider)

    async def translate(self, word: str) -> str | None:
        primary = self.primary_provider
        if primary:
            translation = await primary.fetch(word)
            if translation:
                return translation

        fallback = self.fallback_provider
        if fallback and (not primary or fallback.provider_name != primary.provider_name):
            logger.info(f"[TranslationService] Falling back to: {fallback.provider_name}")
            return await fallback.fetch(word)

        return None
