"""
Configuration centrale du bot Discord.

Ce module charge les variables d'environnement (.env) et prépare :
- Les intents Discord (voice_states via défaut, message_content, members)
- Le token du bot (DISCORD_TOKEN, ou BOT_TOKEN ; obligatoire)
- Le nom du salon lobby (LOBBY_CHANNEL_NAME, "JTC" par défaut)
- Les niveaux de log (LOG_LEVEL, DISCORD_LOG_LEVEL)

Un warning est émis si le token est absent pour détecter le problème avant le lancement du bot.
"""
from __future__ import annotations

import os
import logging
from dotenv import load_dotenv
import discord

load_dotenv()

logger = logging.getLogger(__name__)

INTENTS = discord.Intents.default()
INTENTS.message_content = True  # lecture des commandes `,vc`
INTENTS.members = True  # résolution par nom (fetch_members)

BOT_TOKEN = os.getenv("DISCORD_TOKEN") or os.getenv("BOT_TOKEN")

LOBBY_CHANNEL_NAME = (os.getenv("LOBBY_CHANNEL_NAME") or "JTC").strip()
COMMAND_PREFIX = ",vc"

LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
DISCORD_LOG_LEVEL = (os.getenv("DISCORD_LOG_LEVEL") or "WARNING").strip().upper()


# Avertit si le token du bot est absent
if not BOT_TOKEN:
    logger.warning("DISCORD_TOKEN manquant dans l'environnement")
