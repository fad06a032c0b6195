# Area: Dialogue
"""
drivethru_scorer._dialogue.response_builder - Response Builder
==============================================================

Builds DialogueResponse values. An "ask" response keeps the
conversation open and carries a reprompt; a "tell" response closes it.
Unless a card is supplied, responses carry a "Session" card echoing
the speech.
"""

from typing import Optional

from ..types import Card, DialogueResponse
from .text import APOLOGY, SESSION_CARD_TITLE


def _session_card(speech_text: str) -> Optional[Card]:
    if not speech_text:
        return None
    return Card(title=SESSION_CARD_TITLE, body=speech_text)


def build_ask_response(
    speech_text: str, reprompt_text: str, card: Optional[Card] = None
) -> DialogueResponse:
    """
    Build a response that expects a follow-up.

    Args:
        speech_text: Text to speak now
        reprompt_text: Text to speak if the user stays silent
        card: Card to show; defaults to a Session card with the speech

    Returns:
        Open-session response
    """
    return DialogueResponse(
        speech_text=speech_text,
        reprompt_text=reprompt_text,
        should_end_session=False,
        card=card if card is not None else _session_card(speech_text),
    )


def build_tell_response(speech_text: str, card: Optional[Card] = None) -> DialogueResponse:
    """
    Build a response that ends the session.

    Args:
        speech_text: Text to speak; may be empty
        card: Card to show; defaults to a Session card when there is speech

    Returns:
        Terminal response without a reprompt
    """
    return DialogueResponse(
        speech_text=speech_text,
        reprompt_text=None,
        should_end_session=True,
        card=card if card is not None else _session_card(speech_text),
    )


def build_apology_response() -> DialogueResponse:
    """Generic response a transport renders after a StorageError."""
    return build_tell_response(APOLOGY)
