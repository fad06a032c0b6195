# Area: Dialogue
"""
drivethru_scorer._dialogue.formatter - Score rendering
======================================================

Pure functions that turn a Game into speech text and a leaderboard
card. Both walk ``game.players`` in join order and keep no state
between calls, so the same game always renders the same text.
"""

from ..types import Card
from .._state import Game
from .text import LEADERBOARD_CARD_TITLE


def format_points(score: int) -> str:
    """"1 point" for exactly one, "N points" otherwise (including 0 and negatives)."""
    return f"{score} point" if score == 1 else f"{score} points"


def scores_as_speech(game: Game) -> str:
    """
    Render every player's score as one spoken sentence.

    With more than one player the last clause is introduced by "and":
    "A has 5 points, B has 3 points, and C has 5 points, ".

    Args:
        game: Game whose players are read in join order

    Returns:
        Speech text, empty for a game without players
    """
    scores = game.ordered_scores()
    last = len(scores) - 1
    parts = []
    for index, (name, score) in enumerate(scores):
        if len(scores) > 1 and index == last:
            parts.append("and ")
        parts.append(f"{name} has {format_points(score)}, ")
    return "".join(parts)


def leaderboard_card(game: Game) -> Card:
    """
    Build the leaderboard card.

    Rank is join order (1-based), not score: a player who joined first
    is "No. 1" whatever their score.

    Args:
        game: Game whose players are read in join order

    Returns:
        Card titled "Leaderboard" with one "No. <rank> - <name> : <score>" line per player
    """
    body = "".join(
        f"No. {rank} - {name} : {score}\n"
        for rank, (name, score) in enumerate(game.ordered_scores(), start=1)
    )
    return Card(title=LEADERBOARD_CARD_TITLE, body=body)
