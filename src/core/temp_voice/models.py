from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Set

logger = logging.getLogger(__name__)


@dataclass
class TempChannelRecord:
    """État en mémoire d'un salon temporaire.

    Un identifiant n'est jamais à la fois dans `rejected_users` et
    `permitted_users` : chaque opération retire l'id de l'ensemble opposé.
    """

    channel_id: int
    owner_id: int
    locked: bool = False
    rejected_users: Set[int] = field(default_factory=set)
    permitted_users: Set[int] = field(default_factory=set)

    def is_owner(self, user_id: int) -> bool:
        return self.owner_id == user_id

    def reject(self, user_id: int) -> None:
        self.rejected_users.add(user_id)
        self.permitted_users.discard(user_id)

    def permit(self, user_id: int) -> None:
        self.permitted_users.add(user_id)
        self.rejected_users.discard(user_id)

    def toggle_lock(self) -> bool:
        self.locked = not self.locked
        return self.locked


class TempChannelRegistry:
    """Registre des salons temporaires vivants (channel_id -> record).

    Aucune persistance : vide au démarrage, perdu à l'arrêt.
    """

    def __init__(self):
        self._records: Dict[int, TempChannelRecord] = {}

    def create(self, channel_id: int, owner_id: int) -> TempChannelRecord:
        record = TempChannelRecord(channel_id=channel_id, owner_id=owner_id)
        self._records[channel_id] = record
        logger.debug("Record créé pour %s (owner %s)", channel_id, owner_id)
        return record

    def get(self, channel_id: int) -> Optional[TempChannelRecord]:
        return self._records.get(channel_id)

    def remove(self, channel_id: int) -> Optional[TempChannelRecord]:
        return self._records.pop(channel_id, None)

    def __contains__(self, channel_id: object) -> bool:
        return channel_id in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._records))
