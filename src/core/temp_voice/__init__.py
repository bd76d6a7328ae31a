"""Temp voice core package.

Les imports sont effectués de manière lazy pour éviter de charger le manager
(et ses dépendances views/config) quand seul le modèle est nécessaire.
"""
from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # aide mypy/IDE sans exécuter les imports au runtime initial
	from .manager import TempVoiceManager, notify  # noqa: F401
	from .models import TempChannelRecord, TempChannelRegistry  # noqa: F401
	from .resolver import resolve_member  # noqa: F401

__all__ = ["TempVoiceManager", "notify", "TempChannelRecord", "TempChannelRegistry", "resolve_member"]

_LAZY = {
	"TempVoiceManager": "core.temp_voice.manager",
	"notify": "core.temp_voice.manager",
	"TempChannelRecord": "core.temp_voice.models",
	"TempChannelRegistry": "core.temp_voice.models",
	"resolve_member": "core.temp_voice.resolver",
}


def __getattr__(name: str):  # lazy resolution
	module_name = _LAZY.get(name)
	if module_name is None:
		raise AttributeError(name)
	return getattr(import_module(module_name), name)
