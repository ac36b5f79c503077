"""Offline translation provider backed by a built-in word table."""

from __future__ import annotations

import logging

from vocabmaster.services.translation.base import TranslationProvider

logger = logging.getLogger(__name__)

# English -> Vietnamese translations for very common words
COMMON_TRANSLATIONS: dict[str, dict[str, str]] = {
    "vi": {
        "hello": "xin chào",
        "world": "thế giới",
        "computer": "máy tính",
        "book": "sách",
        "water": "nước",
        "breathe": "thở",
        "breath": "hơi thở",
        "head": "đầu",
        "hand": "tay",
        "foot": "chân",
        "eye": "mắt",
        "ear": "tai",
        "mouth": "miệng",
        "nose": "mũi",
        "go": "đi",
        "come": "đến",
        "eat": "ăn",
        "drink": "uống",
        "sleep": "ngủ",
        "walk": "đi bộ",
        "run": "chạy",
        "talk": "nói chuyện",
        "speak": "nói",
        "listen": "nghe",
        "see": "nhìn",
        "watch": "xem",
        "read": "đọc",
        "write": "viết",
        "good": "tốt",
        "bad": "xấu",
        "big": "lớn",
        "small": "nhỏ",
        "hot": "nóng",
        "cold": "lạnh",
        "new": "mới",
        "old": "cũ",
        "happy": "vui vẻ",
        "sad": "buồn",
        "man": "đàn ông",
        "woman": "phụ nữ",
        "child": "trẻ em",
        "boy": "bé trai",
        "girl": "bé gái",
        "house": "nhà",
        "car": "xe hơi",
        "food": "thức ăn",
        "time": "thời gian",
        "day": "ngày",
        "night": "đêm",
        "year": "năm",
        "month": "tháng",
        "week": "tuần",
        "one": "một",
        "two": "hai",
        "three": "ba",
        "four": "bốn",
        "five": "năm",
        "six": "sáu",
        "seven": "bảy",
        "eight": "tám",
        "nine": "chín",
        "ten": "mười",
    },
}


class StaticTranslationProvider(TranslationProvider):
    """Translation provider that never touches the network."""

    provider_name = "static"

    def __init__(
        self, target_language: str = "vi", table: dict[str, str] | None = None
    ) -> None:
        self.target_language = target_language
        source = table if table is not None else COMMON_TRANSLATIONS.get(target_language, {})
        self._table = {word.lower(): translation for word, translation in source.items()}

    async def translate(self, word: str) -> str | None:
        translation = self._table.get(word.lower())
        if translation:
            logger.debug(f"[StaticTranslation] Found fallback translation for '{word}'")
        return translation
