"""
Textes utilisateur des salons temporaires (commandes `,vc` et DM d'accès).
"""
from __future__ import annotations

COMMAND_NAMES = ("reject", "lock", "permit", "transfer")


def fmt_channel_name(display_name: str) -> str:
    return f"{display_name}'s Channel"

# ---- préconditions ----
def msg_not_in_voice() -> str: return "❌ You need to be in a voice channel to use voice commands."
def msg_not_temp_channel() -> str: return "❌ This command can only be used in temporary voice channels."
def msg_not_owner() -> str: return "❌ Only the channel owner can use this command."
def msg_unknown_command() -> str:
    return "❌ Unknown command. Available commands: " + ", ".join(f"`{name}`" for name in COMMAND_NAMES)

# ---- résolution ----
def msg_usage(command: str, action: str) -> str:
    return f"❌ Please specify a user to {action}. Usage: `,vc {command} @user` or `,vc {command} userId`"
def msg_user_not_found() -> str: return "❌ User not found."

# ---- reject ----
def msg_cannot_reject_self() -> str: return "❌ You cannot reject yourself."
def msg_rejected(name: str) -> str: return f"✅ {name} has been rejected from this channel."
def msg_reject_failed() -> str: return "❌ An error occurred while rejecting the user."

# ---- lock ----
def msg_locked() -> str: return "🔒 Channel has been locked. Only permitted users can join now."
def msg_unlocked() -> str: return "🔓 Channel has been unlocked. Anyone can join now."
def msg_lock_failed() -> str: return "❌ An error occurred while toggling the lock."

# ---- permit ----
def msg_permitted(name: str) -> str: return f"✅ {name} has been permitted to join this channel."
def msg_permit_failed() -> str: return "❌ An error occurred while permitting the user."

# ---- transfer ----
def msg_cannot_transfer_self() -> str: return "❌ You cannot transfer ownership to yourself."
def msg_target_not_in_channel() -> str: return "❌ The target user must be in the voice channel to receive ownership."
def msg_transferred(name: str) -> str: return f"✅ Channel ownership has been transferred to {name}."
def msg_transfer_failed() -> str: return "❌ An error occurred while transferring ownership."

# ---- DM d'accès ----
def msg_dm_locked() -> str: return "❌ That voice channel is locked. You need permission from the owner to join."
def msg_dm_rejected() -> str: return "❌ You have been rejected from that voice channel."

__all__ = ["COMMAND_NAMES"] + [name for name in globals().keys() if name.startswith('msg_') or name.startswith('fmt_')]
