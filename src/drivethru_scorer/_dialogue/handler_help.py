# Area: Dialogue
"""
drivethru_scorer._dialogue.handler_help - Help Handler
======================================================

The first help request in a session gets the complete help text;
later ones get the short next-step prompt.
"""

from typing import Optional

from .enums import DialogueEvent
from .handler_base import BaseIntentHandler
from .response_builder import build_ask_response
from .text import COMPLETE_HELP, HELP_PROMPT, NEXT_HELP
from ..types import DialogueResponse, InboundEvent
from .._state import Session


class HelpHandler(BaseIntentHandler):
    """Handler for Help. Counts deliveries on the session; never touches the game."""

    def handle(
        self, event: InboundEvent, session: Optional[Session]
    ) -> DialogueResponse:
        self.log_handling(DialogueEvent.HELP.value, event.session_id)

        if session is None:
            session = Session.new(event.session_id)

        if session.has_had_help:
            response = build_ask_response(NEXT_HELP, NEXT_HELP)
        else:
            response = build_ask_response(COMPLETE_HELP + HELP_PROMPT, NEXT_HELP)

        session.help_count += 1
        self.store.save_session(session)
        return response
