from __future__ import annotations

from fastapi import HTTPException, status

from resume_matcher.core.config import settings


def _normalize_lang(lang: str | None) -> str:
    if not lang:
        return "en"
    return lang.split(",")[0].strip().lower()


def _auth_error_message(lang: str | None) -> str:
    key = _normalize_lang(lang)
    messages = {
        "en": "Please provide a valid API key to run a resume analysis.",
        "de": "Bitte gib einen gültigen API‑Schlüssel an, um eine Lebenslauf-Analyse zu starten.",
        "fr": "Veuillez fournir une clé API valide pour lancer une analyse de CV.",
        "es": "Por favor, proporciona una clave API válida para analizar tu currículum.",
        "it": "Per favore, fornisci una chiave API valida per analizzare il tuo curriculum.",
    }
    return messages.get(key, messages["en"])


def analysis_allowed(x_api_key: str | None) -> bool:
    if settings.analysis_auth_mode == "public" or not settings.api_key:
        return True
    return x_api_key == settings.api_key


def check_api_key(x_api_key: str | None, lang: str | None = None) -> None:
    if not analysis_allowed(x_api_key):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=_auth_error_message(lang),
        )
