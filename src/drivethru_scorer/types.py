# Area: Shared
"""
drivethru_scorer.types - Inbound event and outbound response records
=====================================================================

These are the only shapes the dialogue engine exchanges with the
request/response adapter. They are pydantic models so an adapter can
validate a raw payload in one call:

    >>> InboundEvent.model_validate(
    ...     {"sessionId": "S1", "intentName": "AddScore",
    ...      "slots": {"PlayerName": "Ann", "ScoreNumber": "5"}})

Wire names are camelCase; Python attribute names are snake_case and
either form is accepted on input.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class InboundEvent(BaseModel):
    """One pre-classified user request.

    Fields
    ------
    session_id : str
        Conversation identifier, e.g. "SessionId.1234".
    intent_name : str
        Intent name, e.g. "Launch" or "AddScore".
    slots : Dict[str, Optional[str]]
        Slot name -> raw slot value. Missing and empty values are both
        treated as "not supplied".
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    session_id: str = Field(alias="sessionId", min_length=1)
    intent_name: str = Field(alias="intentName", min_length=1)
    slots: Dict[str, Optional[str]] = Field(default_factory=dict)

    def slot(self, name: str) -> Optional[str]:
        """Return a stripped slot value, or None when absent or blank."""
        value = self.slots.get(name)
        if value is None:
            return None
        value = value.strip()
        return value or None


class Card(BaseModel):
    """Visual summary shown next to the spoken response."""
    model_config = ConfigDict(frozen=True)

    title: str
    body: str


class DialogueResponse(BaseModel):
    """Rendered outcome of one turn.

    Fields
    ------
    speech_text : str
        Text to speak. May be empty on a terminal exit.
    reprompt_text : Optional[str]
        Present only when the turn expects a follow-up.
    should_end_session : bool
        True when the conversation is over.
    card : Optional[Card]
        Visual summary, if any.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    speech_text: str = Field(alias="speechText")
    reprompt_text: Optional[str] = Field(default=None, alias="repromptText")
    should_end_session: bool = Field(default=False, alias="shouldEndSession")
    card: Optional[Card] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase wire representation."""
        return self.model_dump(by_alias=True, exclude_none=True)
