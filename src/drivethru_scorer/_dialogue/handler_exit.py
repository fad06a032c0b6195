# Area: Dialogue
"""
drivethru_scorer._dialogue.handler_exit - Exit Handler
======================================================

Ends the conversation once scoring has started. Before the first
score the user is nudged to keep going and the session stays open.
"""

import logging
from typing import Optional

from .enums import DialogueEvent
from .handler_base import BaseIntentHandler
from .response_builder import build_ask_response, build_tell_response
from .text import EXIT_NUDGE, NEXT_HELP
from ..types import DialogueResponse, InboundEvent
from .._state import Session

logger = logging.getLogger("drivethru_scorer.dialogue.handler.exit")


class ExitHandler(BaseIntentHandler):
    """Handler for Exit. The only transition into ENDED."""

    def handle(
        self, event: InboundEvent, session: Optional[Session]
    ) -> DialogueResponse:
        self.log_handling(DialogueEvent.EXIT.value, event.session_id)

        if session is None or session.needs_more_help:
            return build_ask_response(EXIT_NUDGE, NEXT_HELP)

        self.advance(session, DialogueEvent.EXIT)
        session.pending_player_name = None
        self.store.save_session(session)
        logger.info(f"Session {session.session_id} ended")
        return build_tell_response("")
