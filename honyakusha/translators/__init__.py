"""Clients for Google Translate, Bing Translator, DeepL and LibreTranslate."""