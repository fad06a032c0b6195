# Area: Dialogue
"""
drivethru_scorer._dialogue.handler_tell_scores - Tell Scores Handler
====================================================================

Reads every score aloud and shows the leaderboard. Read-only.
"""

import logging
from typing import Optional

from .enums import DialogueEvent
from .formatter import leaderboard_card, scores_as_speech
from .handler_base import BaseIntentHandler
from .response_builder import build_ask_response
from .text import LAUNCH_REPROMPT, NEXT_HELP, NO_PLAYERS_YET
from ..types import DialogueResponse, InboundEvent
from .._state import Session

logger = logging.getLogger("drivethru_scorer.dialogue.handler.tell_scores")


class TellScoresHandler(BaseIntentHandler):
    """Handler for TellScores."""

    def handle(
        self, event: InboundEvent, session: Optional[Session]
    ) -> DialogueResponse:
        self.log_handling(DialogueEvent.TELL_SCORES.value, event.session_id)

        game_id = session.game_id if session is not None else event.session_id
        game = self.store.load_game(game_id)
        if game is None or game.player_count() == 0:
            return build_ask_response(NO_PLAYERS_YET, LAUNCH_REPROMPT)

        # Unlike AddScore, an explicit request always reads every player
        return build_ask_response(
            scores_as_speech(game), NEXT_HELP, card=leaderboard_card(game)
        )
