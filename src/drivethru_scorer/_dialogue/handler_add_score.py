# Area: Dialogue
"""
drivethru_scorer._dialogue.handler_add_score - Add Score Handler
================================================================

Adds points to a registered player, persists the game and reads the
scores back.
"""

import logging
from typing import Optional

from .enums import DialogueEvent
from .formatter import format_points, leaderboard_card, scores_as_speech
from .handler_base import BaseIntentHandler
from .response_builder import build_ask_response
from .text import (
    ASK_PLAYER,
    ASK_SCORE,
    LAUNCH_REPROMPT,
    MAX_PLAYERS_FOR_SPEECH,
    NEXT_HELP,
    NO_GAME_YET,
    SLOT_PLAYER_NAME,
    SLOT_SCORE_NUMBER,
    UNKNOWN_PLAYER,
)
from ..types import DialogueResponse, InboundEvent
from .._state import Game, Session

logger = logging.getLogger("drivethru_scorer.dialogue.handler.add_score")


class AddScoreHandler(BaseIntentHandler):
    """
    Handler for AddScore.

    The player comes from the PlayerName slot, or from the session's
    pending player when the slot is absent. Any problem with the slots
    is answered with a clarifying question and nothing is written.
    """

    def handle(
        self, event: InboundEvent, session: Optional[Session]
    ) -> DialogueResponse:
        self.log_handling(DialogueEvent.ADD_SCORE.value, event.session_id)

        if session is None:
            logger.info(f"AddScore before launch for {event.session_id}")
            return build_ask_response(NO_GAME_YET, LAUNCH_REPROMPT)

        name = event.slot(SLOT_PLAYER_NAME) or session.pending_player_name
        if name is None:
            return build_ask_response(ASK_PLAYER, ASK_PLAYER)

        game = self.store.load_game(session.game_id)
        if game is None or not game.has_player(name):
            logger.info(f"Unknown player {name} in game {session.game_id}")
            return build_ask_response(UNKNOWN_PLAYER.format(name=name), ASK_PLAYER)

        delta = self.parse_score(event.slot(SLOT_SCORE_NUMBER))
        if delta is None:
            prompt = ASK_SCORE.format(name=name)
            return build_ask_response(prompt, prompt)

        total = game.add_score(name, delta)
        session.pending_player_name = None
        session.needs_more_help = False
        self.advance(session, DialogueEvent.ADD_SCORE)
        self.store.save_turn(game, session)

        logger.info(f"{name} scored {delta} in game {game.game_id}, total {total}")
        return build_ask_response(
            self._score_speech(game, name, delta, total),
            NEXT_HELP,
            card=leaderboard_card(game),
        )

    def _score_speech(self, game: Game, name: str, delta: int, total: int) -> str:
        speech = f"{delta} for {name}. "
        if game.player_count() <= MAX_PLAYERS_FOR_SPEECH:
            return speech + scores_as_speech(game)
        return speech + f"{name} has {format_points(total)} in total."
