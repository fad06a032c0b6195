# Area: Dialogue
"""
drivethru_scorer._dialogue.manager - Dialogue Manager
=====================================================

Loads the session for each inbound event, gates ended conversations,
routes the intent to its handler and returns the rendered response.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from .enums import DialogueEvent, resolve_event
from .router import IntentRouter
from .state_machine import DialogueStateMachine
from .handler_launch import LaunchHandler
from .handler_provide_name import ProvideNameHandler
from .handler_add_score import AddScoreHandler
from .handler_tell_scores import TellScoresHandler
from .handler_help import HelpHandler
from .handler_exit import ExitHandler
from .response_builder import build_ask_response, build_tell_response
from .text import NEXT_HELP, NOT_UNDERSTOOD, SESSION_ENDED
from ..errors import InvalidEventError, StorageError
from ..types import DialogueResponse, InboundEvent
from .._shared.logging_config import log_storage_error
from .._state import Session
from .._storage.store import ScoreStore

logger = logging.getLogger("drivethru_scorer.dialogue.manager")


class DialogueManager:
    """
    Processes one inbound event per call.

    Slot and intent problems are answered in-dialogue. A StorageError
    is logged and re-raised unchanged; the caller owns the apology.
    """

    def __init__(self, store: ScoreStore):
        self.store = store
        self.router = IntentRouter()
        self._register_handlers()

    def _register_handlers(self) -> None:
        reg = self.router.register_handler
        reg(DialogueEvent.LAUNCH, LaunchHandler(self.store))
        reg(DialogueEvent.PROVIDE_NAME, ProvideNameHandler(self.store))
        reg(DialogueEvent.ADD_SCORE, AddScoreHandler(self.store))
        reg(DialogueEvent.TELL_SCORES, TellScoresHandler(self.store))
        reg(DialogueEvent.HELP, HelpHandler(self.store))
        reg(DialogueEvent.EXIT, ExitHandler(self.store))

    def handle_payload(self, payload: Dict[str, Any]) -> DialogueResponse:
        """Validate a raw adapter payload, then handle it."""
        try:
            event = InboundEvent.model_validate(payload)
        except ValidationError as exc:
            errors = [f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors()]
            raise InvalidEventError(payload, errors) from exc
        return self.handle(event)

    def handle(self, event: InboundEvent) -> DialogueResponse:
        dialogue_event = resolve_event(event.intent_name)
        if dialogue_event is None:
            logger.warning(f"Unrecognized intent: {event.intent_name}")
            return build_ask_response(NOT_UNDERSTOOD, NEXT_HELP)
        try:
            return self._dispatch(dialogue_event, event)
        except StorageError as exc:
            log_storage_error(exc, event.session_id)
            raise

    def _dispatch(self, dialogue_event: DialogueEvent, event: InboundEvent) -> DialogueResponse:
        session: Optional[Session] = self.store.load_session(event.session_id)
        machine = DialogueStateMachine(session.state if session else None)
        if machine.is_ended() and not machine.can_transition(dialogue_event):
            logger.info(
                f"{dialogue_event.value} ignored in ended session {event.session_id}"
            )
            return build_tell_response(SESSION_ENDED)
        response = self.router.route(dialogue_event, event, session)
        if response is None:
            return build_ask_response(NOT_UNDERSTOOD, NEXT_HELP)
        return response
