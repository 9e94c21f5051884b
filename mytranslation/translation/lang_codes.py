"""
言語コード正規化ユーティリティ

BCP-47 言語コードの正規化と Google Translate 向けの変換を提供。
MyTranslationService の言語チェックには使用しない（完全一致で判定する）。
"""

import langcodes

LANGUAGE_NAMES = {
    "ru": "Russian",
    "en": "English",
    "ja": "Japanese",
    "zh": "Simplified Chinese",
    "zh-TW": "Traditional Chinese",
    "de": "German",
    "fr": "French",
    "es": "Spanish",
}


def to_iso639_1(code: str) -> str:
    """
    BCP-47 言語コードを ISO 639-1 に変換

    Examples:
        >>> to_iso639_1("ru-RU")
        'ru'
        >>> to_iso639_1("ZH-TW")
        'zh'

    Raises:
        ValueError: 言語を特定できないコード（"und" など）
    """
    iso = langcodes.Language.get(code).language
    if not iso:
        raise ValueError(f"Cannot determine language for code: {code!r}")
    return iso


def normalize_for_google(lang: str) -> str:
    """
    Google Translate 用に正規化

    "auto" はそのまま返す。Google は zh-CN/zh-TW を区別するため、
    元の入力が zh-TW なら維持する。

    Examples:
        >>> normalize_for_google("ru")
        'ru'
        >>> normalize_for_google("zh")
        'zh-CN'
    """
    if lang == "auto":
        return lang
    if lang.lower() in ("zh-tw", "zh-hant"):
        return "zh-TW"
    iso = to_iso639_1(lang)
    if iso == "zh":
        return "zh-CN"
    return iso


def get_language_name(lang: str) -> str:
    """英語での言語名を取得（例: "Russian"）"""
    if lang.lower() in ("zh-tw", "zh-hant"):
        return LANGUAGE_NAMES["zh-TW"]
    iso = to_iso639_1(lang)
    if iso in LANGUAGE_NAMES:
        return LANGUAGE_NAMES[iso]
    return langcodes.Language.get(lang).display_name()
