"""
Configuration centralisée du logging pour le bot Discord.

Objectifs :
- Un seul setup idempotent (évite la duplication des handlers)
- Déduplication des messages identiques rapprochés (rafales d'événements vocaux)
- Niveau séparé pour le logger `discord` (très bavard en DEBUG)
"""
from __future__ import annotations

import logging
import threading
import time

from core import config

_INITIALIZED = False

DEFAULT_FORMAT = '[%(asctime)s] %(levelname)s %(name)s: %(message)s'
DEDUP_WINDOW_SECONDS = 5.0


class _DeduplicateFilter(logging.Filter):
    """Écarte un message identique (logger, niveau, texte) vu il y a moins de `window` secondes."""

    def __init__(self, window: float = DEDUP_WINDOW_SECONDS):
        super().__init__()
        self.window = window
        self._lock = threading.Lock()
        self._last_seen: dict[tuple[str, int, str], float] = {}

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        try:
            rendered = record.getMessage()
        except Exception:  # noqa: BLE001
            rendered = str(record.msg)
        key = (record.name, record.levelno, rendered)
        now = time.monotonic()
        with self._lock:
            last = self._last_seen.get(key)
            self._last_seen[key] = now
            # Limite la croissance mémoire
            if len(self._last_seen) > 5000:
                self._last_seen = {k: t for k, t in self._last_seen.items() if now - t < self.window}
        return last is None or now - last >= self.window


def _level(name: str, default: int) -> int:
    value = getattr(logging, name, None)
    return value if isinstance(value, int) else default


def setup_logging(force: bool = False) -> None:
    global _INITIALIZED
    if _INITIALIZED and not force:
        return

    root = logging.getLogger()
    if force:
        # Purge tous les handlers existants
        for h in list(root.handlers):
            root.removeHandler(h)
    if not root.handlers:
        root.addHandler(logging.StreamHandler())
    # Uniformise format et filtre sur chaque handler
    for h in root.handlers:
        h.addFilter(_DeduplicateFilter())
        h.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    root.setLevel(_level(config.LOG_LEVEL, logging.INFO))
    logging.getLogger("discord").setLevel(_level(config.DISCORD_LOG_LEVEL, logging.WARNING))
    _INITIALIZED = True


__all__ = ["setup_logging"]
