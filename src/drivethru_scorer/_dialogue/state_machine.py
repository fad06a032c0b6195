# Area: Dialogue
"""
drivethru_scorer._dialogue.state_machine - Dialogue State Machine
=================================================================

Implements the state machine that tracks where a conversation is:
waiting for a player name, waiting for that player's score, scoring,
or ended. The machine itself holds no durable state; the current
state is read from and written back to the Session record each turn.
"""

import logging
from typing import Optional
from .enums import DialogueState, DialogueEvent

logger = logging.getLogger("drivethru_scorer.dialogue.state_machine")


_OPEN_TRANSITIONS = {
    DialogueEvent.LAUNCH: DialogueState.AWAITING_NAME,
    DialogueEvent.PROVIDE_NAME: DialogueState.AWAITING_SCORE,
    DialogueEvent.ADD_SCORE: DialogueState.IN_GAME,
    DialogueEvent.EXIT: DialogueState.ENDED,
}

# Valid state transitions: {current_state: {event: next_state}}
# HELP and TELL_SCORES keep the current state.
TRANSITIONS = {
    DialogueState.AWAITING_NAME: {
        **_OPEN_TRANSITIONS,
        DialogueEvent.HELP: DialogueState.AWAITING_NAME,
        DialogueEvent.TELL_SCORES: DialogueState.AWAITING_NAME,
    },
    DialogueState.AWAITING_SCORE: {
        **_OPEN_TRANSITIONS,
        DialogueEvent.HELP: DialogueState.AWAITING_SCORE,
        DialogueEvent.TELL_SCORES: DialogueState.AWAITING_SCORE,
    },
    DialogueState.IN_GAME: {
        **_OPEN_TRANSITIONS,
        DialogueEvent.HELP: DialogueState.IN_GAME,
        DialogueEvent.TELL_SCORES: DialogueState.IN_GAME,
    },
    DialogueState.ENDED: {
        DialogueEvent.LAUNCH: DialogueState.AWAITING_NAME,
    },
}


class DialogueStateMachine:
    """
    State machine for one conversation.

    Validates and executes transitions based on recognized intents.

    Attributes:
        current_state: The current state of the state machine
    """

    def __init__(self, current_state: Optional[DialogueState] = None):
        """Initialize in the given state, or AWAITING_NAME for a new conversation."""
        self.current_state = current_state or DialogueState.AWAITING_NAME

    def can_transition(self, event: DialogueEvent) -> bool:
        """
        Check if a transition is valid from current state.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        valid_transitions = TRANSITIONS.get(self.current_state, {})
        return event in valid_transitions

    def transition(self, event: DialogueEvent) -> DialogueState:
        """
        Execute a state transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new state after transition

        Raises:
            ValueError: If the transition is not valid
        """
        if not self.can_transition(event):
            raise ValueError(
                f"Invalid transition: {event.value} from {self.current_state.value}"
            )

        next_state = TRANSITIONS[self.current_state][event]
        if next_state != self.current_state:
            logger.debug(
                f"{self.current_state.value} -> {next_state.value} on {event.value}"
            )
        self.current_state = next_state
        return next_state

    def is_ended(self) -> bool:
        return self.current_state == DialogueState.ENDED
