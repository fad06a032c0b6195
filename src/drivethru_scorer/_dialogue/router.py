# Area: Dialogue
"""
drivethru_scorer._dialogue.router - Intent Router
=================================================

Routes recognized intents to their handlers.
"""

import logging
from typing import Dict, Optional, Protocol

from .enums import DialogueEvent
from ..types import DialogueResponse, InboundEvent
from .._state import Session

logger = logging.getLogger("drivethru_scorer.dialogue.router")


class IntentHandler(Protocol):
    """Protocol for intent handlers."""

    def handle(
        self, event: InboundEvent, session: Optional[Session]
    ) -> DialogueResponse:
        """Handle one turn and return the rendered response."""
        ...


class IntentRouter:
    """
    Routes dialogue events to handlers.

    Maintains a registry of handlers for each event and dispatches
    incoming turns to the appropriate handler.

    Usage:
        router = IntentRouter()
        router.register_handler(DialogueEvent.HELP, help_handler)
        response = router.route(DialogueEvent.HELP, event, session)
    """

    def __init__(self):
        """Initialize router with empty handler registry."""
        self._handlers: Dict[DialogueEvent, IntentHandler] = {}

    def register_handler(self, dialogue_event: DialogueEvent, handler: IntentHandler) -> None:
        """
        Register a handler for an event.

        Args:
            dialogue_event: The event to handle
            handler: The handler instance
        """
        self._handlers[dialogue_event] = handler
        logger.debug(f"Registered handler for {dialogue_event.value}")

    def route(
        self,
        dialogue_event: DialogueEvent,
        event: InboundEvent,
        session: Optional[Session],
    ) -> Optional[DialogueResponse]:
        """
        Route a turn to its handler.

        Args:
            dialogue_event: The resolved event
            event: The inbound event with its slots
            session: The stored session, or None for a new conversation

        Returns:
            The handler's response, or None if no handler found
        """
        handler = self._handlers.get(dialogue_event)

        if handler is None:
            logger.warning(f"No handler for event: {dialogue_event.value}")
            return None

        logger.info(f"Routing {dialogue_event.value} to handler")
        return handler.handle(event, session)
