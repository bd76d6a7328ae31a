"""
Classe principale du bot Discord.

Responsabilités :
- Crée le client Discord.
- Construit le registre des salons temporaires (état en mémoire unique) et
  le transmet au manager vocal et au dispatcher `,vc`.
- Charge dynamiquement les commandes `,vc` et enregistre les événements.

Note : L'initialisation asynchrone est centralisée dans `setup_hook`, appelé avant `on_ready`.
"""
from __future__ import annotations

import logging
import discord

from core import config
from core.dispatcher import CommandDispatcher
from core.temp_voice.manager import TempVoiceManager
from core.temp_voice.models import TempChannelRegistry

logger = logging.getLogger(__name__)

class Bot(discord.Client):
    """
    Client Discord étendu, encapsulant l'état applicatif.

    Attributs principaux :
        registry : Salons temporaires vivants (aucune persistance)
        temp_voice : Manager du cycle de vie et du contrôle d'accès
        vc_commands : Dispatcher des commandes `,vc`
    """


    def __init__(self, *, lobby_name: str = config.LOBBY_CHANNEL_NAME):
        super().__init__(intents=config.INTENTS)
        self.registry = TempChannelRegistry()
        self.temp_voice = TempVoiceManager(self.registry, lobby_name=lobby_name)
        self.vc_commands = CommandDispatcher(self.registry)

    async def setup_hook(self):
        """
        Initialise les sous-systèmes avant la mise en ligne.

        Séquence :
        1. Chargement des commandes `,vc`
        2. Enregistrement des événements vocaux et messages
        """
        try:
            from commands import load_all_commands  # type: ignore
            loaded = await load_all_commands(self)
            logger.info("Commandes ,vc chargées: %s", ", ".join(loaded) or "(aucune)")
        except Exception:  # noqa: BLE001
            logger.exception("Erreur chargement commandes dynamiques")
        try:
            from events import voice as voice_events, messages as message_events  # type: ignore
            voice_events.setup(self, self.temp_voice)
            message_events.setup(self, self.vc_commands)
        except Exception:  # noqa: BLE001
            logger.exception("Erreur setup events")

    async def on_ready(self):
        """Log d'état lorsque le bot est prêt."""
        logger.info("Connecté: %s (%s) | lobby '%s'", self.user, getattr(self.user, 'id', '?'), self.temp_voice.lobby_name)
