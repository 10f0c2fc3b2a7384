from .intents import Action, Intent, IntentQueue, apply_intent
from .keymap import InputMapper

__all__ = [
    "Action",
    "Intent",
    "IntentQueue",
    "InputMapper",
    "apply_intent",
]
