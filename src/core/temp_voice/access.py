"""
Décision d'admission dans un salon temporaire.

Ordre d'évaluation (premier qui matche) :
1. Salon verrouillé et utilisateur ni propriétaire ni autorisé -> LOCKED
2. Utilisateur rejeté -> REJECTED
3. Sinon -> ADMIT
"""
from __future__ import annotations

import enum

from .models import TempChannelRecord


class JoinVerdict(enum.Enum):
    ADMIT = "admit"
    LOCKED = "locked"
    REJECTED = "rejected"


def evaluate_join(record: TempChannelRecord, user_id: int) -> JoinVerdict:
    if record.locked and not record.is_owner(user_id) and user_id not in record.permitted_users:
        return JoinVerdict.LOCKED
    if user_id in record.rejected_users:
        return JoinVerdict.REJECTED
    return JoinVerdict.ADMIT


__all__ = ["JoinVerdict", "evaluate_join"]
