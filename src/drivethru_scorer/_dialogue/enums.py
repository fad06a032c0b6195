# Area: Dialogue
"""
drivethru_scorer._dialogue.enums - Dialogue State Machine Enums
===============================================================

Defines the states and events for the conversation state machine.
"""

from enum import Enum
from typing import Optional


class DialogueState(Enum):
    """
    States of the dialogue state machine.

    State transitions:
    AWAITING_NAME -> AWAITING_SCORE (on PROVIDE_NAME)
    AWAITING_NAME -> IN_GAME (on ADD_SCORE for a registered player)
    AWAITING_SCORE -> IN_GAME (on ADD_SCORE)
    IN_GAME -> AWAITING_SCORE (on PROVIDE_NAME for another player)
    Any state except ENDED -> ENDED (on EXIT once onboarding is done)
    Any state -> AWAITING_NAME (on LAUNCH)
    """
    AWAITING_NAME = "AWAITING_NAME"
    AWAITING_SCORE = "AWAITING_SCORE"
    IN_GAME = "IN_GAME"
    ENDED = "ENDED"


class DialogueEvent(Enum):
    """
    Events that drive the dialogue state machine.

    Each event corresponds to one recognized intent:
    - LAUNCH: the skill was opened
    - PROVIDE_NAME: the user said a player name
    - HELP: the user asked for help
    - EXIT: the user asked to stop or cancel
    - ADD_SCORE: the user gave points to a player
    - TELL_SCORES: the user asked for the current scores
    """
    LAUNCH = "Launch"
    PROVIDE_NAME = "ProvideName"
    HELP = "Help"
    EXIT = "Exit"
    ADD_SCORE = "AddScore"
    TELL_SCORES = "TellScores"


# Platform intent names accepted as synonyms
INTENT_ALIASES = {
    "LaunchRequest": DialogueEvent.LAUNCH,
    "UserNameIntent": DialogueEvent.PROVIDE_NAME,
    "AMAZON.HelpIntent": DialogueEvent.HELP,
    "AMAZON.StopIntent": DialogueEvent.EXIT,
    "AMAZON.CancelIntent": DialogueEvent.EXIT,
    "AddScoreIntent": DialogueEvent.ADD_SCORE,
    "TellScoresIntent": DialogueEvent.TELL_SCORES,
}


def resolve_event(intent_name: str) -> Optional[DialogueEvent]:
    """
    Map an intent name to a dialogue event.

    Args:
        intent_name: Canonical name ("AddScore") or a platform alias

    Returns:
        The matching event, or None for unrecognized intents
    """
    try:
        return DialogueEvent(intent_name)
    except ValueError:
        return INTENT_ALIASES.get(intent_name)
