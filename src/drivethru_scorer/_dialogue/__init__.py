# Area: Dialogue
"""
Dialogue engine: the conversation state machine and its intent handlers.

This package handles:
- Dialogue states and intent events
- Transition rules
- Routing intents to handlers
- Score speech and leaderboard rendering
"""

from .enums import DialogueState, DialogueEvent, resolve_event
from .state_machine import DialogueStateMachine
from .router import IntentRouter
from .handler_base import BaseIntentHandler

__all__ = [
    "DialogueState",
    "DialogueEvent",
    "resolve_event",
    "DialogueStateMachine",
    "IntentRouter",
    "BaseIntentHandler",
]
