"""
Chargement dynamique des commandes texte `,vc`.

Convention :
- Chaque fichier de ce package (hors _*) expose une fonction `register(bot)`
	qui ajoute sa commande au dispatcher `bot.vc_commands`.
- `load_all_commands(bot)` importe chaque module et renvoie les noms chargés ;
	un module en échec est loggé sans bloquer les autres.
"""
from __future__ import annotations

import importlib
import pkgutil
import logging
import discord

logger = logging.getLogger(__name__)

async def load_all_commands(bot: discord.Client) -> list[str]:
	loaded: list[str] = []
	for mod in pkgutil.iter_modules(__path__):  # type: ignore[name-defined]
		if mod.name.startswith('_'):
			continue
		full_name = f"{__name__}.{mod.name}"
		try:
			module = importlib.import_module(full_name)
			register = getattr(module, 'register', None)
			if register is None:
				continue
			result = register(bot)
			if hasattr(result, '__await__'):
				await result
			loaded.append(mod.name)
			logger.debug("Commande chargée: %s", full_name)
		except Exception:  # noqa: BLE001
			logger.exception("Echec chargement commande %s", full_name)
	return loaded

__all__ = ["load_all_commands"]
