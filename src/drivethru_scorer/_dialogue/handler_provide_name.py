# Area: Dialogue
"""
drivethru_scorer._dialogue.handler_provide_name - Player Name Handler
=====================================================================

Registers a player in the game and asks for their order.
"""

import logging
from typing import Optional

from .enums import DialogueEvent
from .handler_base import BaseIntentHandler
from .response_builder import build_ask_response
from .text import (
    ASK_NAME_AGAIN,
    DUPLICATE_NAME,
    LAUNCH_REPROMPT,
    NAME_ACCEPTED,
    ORDER_REPROMPT,
    SLOT_PLAYER_NAME,
)
from ..types import DialogueResponse, InboundEvent
from .._state import Session

logger = logging.getLogger("drivethru_scorer.dialogue.handler.provide_name")


class ProvideNameHandler(BaseIntentHandler):
    """
    Handler for ProvideName.

    1. Re-ask if the name slot is empty
    2. Create the session and game if this conversation has none
    3. Re-ask if the name is already playing (no duplicate is created)
    4. Add the player with a score of 0, save game and session together
    5. Ask for the player's order
    """

    def handle(
        self, event: InboundEvent, session: Optional[Session]
    ) -> DialogueResponse:
        self.log_handling(DialogueEvent.PROVIDE_NAME.value, event.session_id)

        name = event.slot(SLOT_PLAYER_NAME)
        if name is None:
            return build_ask_response(ASK_NAME_AGAIN, LAUNCH_REPROMPT)

        if session is None:
            session = Session.new(event.session_id)

        game = self.load_or_create_game(session.game_id)
        if not game.add_player(name):
            logger.info(f"Player {name} already in game {game.game_id}, asking again")
            return build_ask_response(DUPLICATE_NAME.format(name=name), LAUNCH_REPROMPT)

        session.pending_player_name = name
        self.advance(session, DialogueEvent.PROVIDE_NAME)
        self.store.save_turn(game, session)

        return build_ask_response(NAME_ACCEPTED.format(name=name), ORDER_REPROMPT)
