# Area: Dialogue
"""
drivethru_scorer._dialogue.handler_launch - Launch Handler
==========================================================

Greets the user and asks for a player name.
"""

import logging
from typing import Optional

from .enums import DialogueEvent, DialogueState
from .handler_base import BaseIntentHandler
from .response_builder import build_ask_response
from .text import LAUNCH_REPROMPT, LAUNCH_SPEECH
from ..types import DialogueResponse, InboundEvent
from .._state import Session

logger = logging.getLogger("drivethru_scorer.dialogue.handler.launch")


class LaunchHandler(BaseIntentHandler):
    """
    Handler for Launch.

    A brand-new conversation writes nothing: the game is created when
    the first name arrives, so repeated launches are idempotent. A
    stored session (for example one that has ended) is moved back to
    AWAITING_NAME and saved, which makes it resumable.
    """

    def handle(
        self, event: InboundEvent, session: Optional[Session]
    ) -> DialogueResponse:
        self.log_handling(DialogueEvent.LAUNCH.value, event.session_id)

        if session is not None and (
            session.state != DialogueState.AWAITING_NAME or session.pending_player_name
        ):
            logger.info(
                f"Relaunching session {session.session_id} from {session.state.value}"
            )
            self.advance(session, DialogueEvent.LAUNCH)
            session.pending_player_name = None
            self.store.save_session(session)

        return build_ask_response(LAUNCH_SPEECH, LAUNCH_REPROMPT)
