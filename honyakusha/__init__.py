"""Translate text using Google Translate, Bing Translator, DeepL and LibreTranslate."""

__version__ = "1.0.0"