"""
Internationalization (i18n) module for quetune.

Provides a simple translation system with English and Spanish support.
Set QUETUNE_LANG environment variable to change language (default: en).
"""

import os
from typing import Dict

# Default language (can be overridden by QUETUNE_LANG env var)
LANG = os.environ.get("QUETUNE_LANG", "en")

STRINGS: Dict[str, Dict[str, str]] = {
    # =========================================================================
    # ENGLISH (Default)
    # =========================================================================
    "en": {
        # Panes
        "pane.explorer": "add songs to playlist",
        "pane.playlist": "playlist",
        # Dialog buttons
        "button.ok": "[ok]",
        "button.yes": "[yes]",
        "button.no": "[no]",
        "button.cancel": "[cancel]",
        # Dialogs
        "dialog.error": "error",
        "dialog.confirm": "are you sure?",
        "dialog.overwrite": "are you sure you want to read {path} and overwrite the current playlist?",
        "dialog.save_title": "save playlist to file",
        "dialog.save_prompt": "enter the desired playlist location:",
        # Status
        "status.explorer": "j/k Move  l Open  a Add  r Load  Tab Playlist  s Save  q Quit",
        "status.playlist": "j/k Move  l Play  J/K Reorder  R Shuffle  Space ⏯  n/N ⏭⏮  Tab Files",
        "status.idle": "Nothing playing",
        "status.playing": "▶ {name}",
        "status.paused": "⏸ {name}",
        "status.added": "Added {count} track(s)",
        "status.loaded": "Loaded {count} track(s) from {path}",
        "status.saved": "Saved {count} track(s) to {path}",
        "status.shuffled": "Playlist shuffled",
    },
    # =========================================================================
    # SPANISH
    # =========================================================================
    "es": {
        "pane.explorer": "agregar canciones",
        "pane.playlist": "playlist",
        "button.ok": "[ok]",
        "button.yes": "[sí]",
        "button.no": "[no]",
        "button.cancel": "[cancelar]",
        "dialog.error": "error",
        "dialog.confirm": "¿estás seguro?",
        "dialog.overwrite": "¿leer {path} y reemplazar la playlist actual?",
        "dialog.save_title": "guardar playlist",
        "dialog.save_prompt": "ingresá la ubicación de la playlist:",
        "status.explorer": "j/k Mover  l Abrir  a Agregar  r Cargar  Tab Playlist  s Guardar  q Salir",
        "status.playlist": "j/k Mover  l Reproducir  J/K Ordenar  R Mezclar  Espacio ⏯  n/N ⏭⏮  Tab Archivos",
        "status.idle": "Nada sonando",
        "status.playing": "▶ {name}",
        "status.paused": "⏸ {name}",
        "status.added": "{count} track(s) agregados",
        "status.loaded": "{count} track(s) cargados de {path}",
        "status.saved": "{count} track(s) guardados en {path}",
        "status.shuffled": "Playlist mezclada",
    },
}


def t(key: str, **kwargs) -> str:
    """
    Translate a string key to the current language.

    Args:
        key: The translation key (e.g., "pane.playlist")
        **kwargs: Optional format arguments

    Returns:
        Translated string, or the key itself if not found

    Example:
        t("status.added", count=3)  # Returns "Added 3 track(s)" in English
    """
    lang_strings = STRINGS.get(LANG, STRINGS["en"])
    text = lang_strings.get(key, STRINGS["en"].get(key, key))

    if kwargs:
        try:
            text = text.format(**kwargs)
        except (KeyError, ValueError):
            pass

    return text


def set_language(lang: str):
    """Set the current language (en or es)."""
    global LANG
    if lang in STRINGS:
        LANG = lang
    else:
        LANG = "en"


def get_language() -> str:
    """Get the current language code."""
    return LANG
