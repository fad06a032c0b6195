# Area: Dialogue
"""
drivethru_scorer._dialogue.text - Spoken text constants
=======================================================

All fixed prompts live here so handlers only assemble them.
"""

# Intent slots
SLOT_PLAYER_NAME = "PlayerName"
SLOT_SCORE_NUMBER = "ScoreNumber"

# Above this many players, adding a score does not read out every score
MAX_PLAYERS_FOR_SPEECH = 3

SESSION_CARD_TITLE = "Session"
LEADERBOARD_CARD_TITLE = "Leaderboard"

LAUNCH_SPEECH = "Good Evening..., May I know your name ?"
LAUNCH_REPROMPT = "May I know your name ? "

ASK_NAME_AGAIN = "Sorry, I didn't get the name. May I know your name ?"
DUPLICATE_NAME = "{name} is already playing. May I know the name of the new player ?"

NAME_ACCEPTED = "Thank you, {name}. Can you please give me your order ?"
ORDER_REPROMPT = "Can you please give me your order ?"

ASK_PLAYER = "Who should I give the points to ?"
UNKNOWN_PLAYER = "Sorry, I couldn't find {name} in this game. Who should I give the points to ?"
ASK_SCORE = "How many points should I give {name} ?"
NO_GAME_YET = "I don't have a game for you yet. May I know your name ?"
NO_PLAYERS_YET = "Nobody has joined the game yet. May I know your name ?"

COMPLETE_HELP = (
    "Here's some things you can say: tell me your name to join the game, "
    "give five points to Ann, tell me the scores, and exit."
)
NEXT_HELP = "You can give a player points, add a player, get the current score, or say help. What would you like?"
HELP_PROMPT = " So, how can I help?"

EXIT_NUDGE = (
    "Okay. Whenever you're ready, you can start giving points to the players in your game."
)

SESSION_ENDED = "This session has ended. Open Drive Thru again to keep score."
NOT_UNDERSTOOD = (
    "Sorry, I didn't catch that. You can tell me a player's name, or give points to a player."
)
APOLOGY = "Sorry, I'm having trouble keeping score right now. Please try again later."
