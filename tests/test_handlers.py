# Area: Dialogue Tests
"""Tests for the intent handlers, one class per intent."""

from drivethru_scorer._dialogue.enums import DialogueState
from drivethru_scorer._dialogue.handler_add_score import AddScoreHandler
from drivethru_scorer._dialogue.handler_exit import ExitHandler
from drivethru_scorer._dialogue.handler_help import HelpHandler
from drivethru_scorer._dialogue.handler_launch import LaunchHandler
from drivethru_scorer._dialogue.handler_provide_name import ProvideNameHandler
from drivethru_scorer._dialogue.handler_tell_scores import TellScoresHandler
from drivethru_scorer._dialogue.text import COMPLETE_HELP, EXIT_NUDGE, NEXT_HELP
from drivethru_scorer._state import Game, Session
from drivethru_scorer.types import InboundEvent


def make_event(intent_name, session_id="S1", **slots):
    return InboundEvent(session_id=session_id, intent_name=intent_name, slots=slots)


def seed(store, session_id="S1", players=None, **session_fields):
    """Store a session and its game."""
    session = Session.new(session_id)
    for key, value in session_fields.items():
        setattr(session, key, value)
    store.save_session(session)
    store.save_game(Game(game_id=session.game_id, players=dict(players or {})))
    return session


class TestLaunchHandler:
    """Tests for LaunchHandler."""

    def test_greets_and_asks_for_name(self, store):
        result = LaunchHandler(store).handle(make_event("Launch"), None)

        assert result.speech_text == "Good Evening..., May I know your name ?"
        assert result.reprompt_text == "May I know your name ? "
        assert result.should_end_session is False

    def test_new_session_writes_nothing(self, store):
        handler = LaunchHandler(store)
        handler.handle(make_event("Launch"), None)
        handler.handle(make_event("Launch"), None)

        assert store.load_session("S1") is None
        assert store.load_game("S1") is None

    def test_relaunch_reopens_ended_session(self, store):
        session = seed(store, state=DialogueState.ENDED, needs_more_help=False)

        LaunchHandler(store).handle(make_event("Launch"), session)

        assert store.load_session("S1").state == DialogueState.AWAITING_NAME


class TestProvideNameHandler:
    """Tests for ProvideNameHandler."""

    def test_registers_player_and_asks_for_order(self, store):
        result = ProvideNameHandler(store).handle(
            make_event("ProvideName", PlayerName="Ann"), None
        )

        assert result.speech_text == "Thank you, Ann. Can you please give me your order ?"
        assert result.reprompt_text == "Can you please give me your order ?"
        assert store.load_game("S1").players == {"Ann": 0}
        session = store.load_session("S1")
        assert session.pending_player_name == "Ann"
        assert session.state == DialogueState.AWAITING_SCORE

    def test_strips_whitespace(self, store):
        ProvideNameHandler(store).handle(make_event("ProvideName", PlayerName="  Ann "), None)
        assert store.load_game("S1").players == {"Ann": 0}

    def test_empty_name_reasks_without_writing(self, store):
        result = ProvideNameHandler(store).handle(
            make_event("ProvideName", PlayerName="   "), None
        )

        assert "name" in result.speech_text
        assert result.should_end_session is False
        assert store.load_session("S1") is None

    def test_missing_slot_reasks(self, store):
        result = ProvideNameHandler(store).handle(make_event("ProvideName"), None)
        assert result.reprompt_text == "May I know your name ? "

    def test_duplicate_name_reasks_without_duplicate(self, store):
        session = seed(store, players={"Ann": 4}, state=DialogueState.IN_GAME)

        result = ProvideNameHandler(store).handle(
            make_event("ProvideName", PlayerName="Ann"), session
        )

        assert result.speech_text.startswith("Ann is already playing.")
        assert result.should_end_session is False
        assert store.load_game("S1").players == {"Ann": 4}
        assert store.load_session("S1").state == DialogueState.IN_GAME


class TestAddScoreHandler:
    """Tests for AddScoreHandler."""

    def test_adds_points_to_named_player(self, store):
        session = seed(store, players={"Ann": 0})

        result = AddScoreHandler(store).handle(
            make_event("AddScore", PlayerName="Ann", ScoreNumber="5"), session
        )

        assert result.speech_text == "5 for Ann. Ann has 5 points, "
        assert result.card.title == "Leaderboard"
        assert store.load_game("S1").players == {"Ann": 5}
        stored = store.load_session("S1")
        assert stored.state == DialogueState.IN_GAME
        assert stored.needs_more_help is False

    def test_uses_pending_player_when_name_missing(self, store):
        session = seed(
            store,
            players={"Ann": 0},
            pending_player_name="Ann",
            state=DialogueState.AWAITING_SCORE,
        )

        AddScoreHandler(store).handle(make_event("AddScore", ScoreNumber="3"), session)

        assert store.load_game("S1").players == {"Ann": 3}
        assert store.load_session("S1").pending_player_name is None

    def test_negative_delta_is_applied_literally(self, store):
        session = seed(store, players={"Ann": 2})

        result = AddScoreHandler(store).handle(
            make_event("AddScore", PlayerName="Ann", ScoreNumber="-5"), session
        )

        assert store.load_game("S1").players == {"Ann": -3}
        assert result.speech_text == "-5 for Ann. Ann has -3 points, "

    def test_unknown_player_asks_again(self, store):
        session = seed(store, players={"Ann": 2})

        result = AddScoreHandler(store).handle(
            make_event("AddScore", PlayerName="Bob", ScoreNumber="5"), session
        )

        assert "couldn't find Bob" in result.speech_text
        assert result.should_end_session is False
        assert store.load_game("S1").players == {"Ann": 2}

    def test_non_integer_score_asks_again(self, store):
        session = seed(store, players={"Ann": 2})

        result = AddScoreHandler(store).handle(
            make_event("AddScore", PlayerName="Ann", ScoreNumber="five"), session
        )

        assert result.speech_text == "How many points should I give Ann ?"
        assert store.load_game("S1").players == {"Ann": 2}
        assert store.load_session("S1").needs_more_help is True

    def test_no_player_at_all_asks_who(self, store):
        session = seed(store, players={"Ann": 2})

        result = AddScoreHandler(store).handle(
            make_event("AddScore", ScoreNumber="5"), session
        )

        assert result.speech_text == "Who should I give the points to ?"

    def test_before_launch_asks_for_name(self, store):
        result = AddScoreHandler(store).handle(
            make_event("AddScore", PlayerName="Ann", ScoreNumber="5"), None
        )

        assert "May I know your name" in result.speech_text
        assert store.load_game("S1") is None

    def test_more_than_three_players_speaks_summary_only(self, store):
        players = {"A": 1, "B": 2, "C": 3, "D": 4}
        session = seed(store, players=players)

        result = AddScoreHandler(store).handle(
            make_event("AddScore", PlayerName="B", ScoreNumber="1"), session
        )

        assert result.speech_text == "1 for B. B has 3 points in total."
        assert result.card.body == (
            "No. 1 - A : 1\nNo. 2 - B : 3\nNo. 3 - C : 3\nNo. 4 - D : 4\n"
        )

    def test_three_players_speaks_everyone(self, store):
        session = seed(store, players={"A": 5, "B": 3, "C": 4})

        result = AddScoreHandler(store).handle(
            make_event("AddScore", PlayerName="C", ScoreNumber="1"), session
        )

        assert result.speech_text == (
            "1 for C. A has 5 points, B has 3 points, and C has 5 points, "
        )


class TestTellScoresHandler:
    """Tests for TellScoresHandler."""

    def test_reads_all_scores(self, store):
        session = seed(store, players={"A": 1, "B": 2, "C": 3, "D": 4})

        result = TellScoresHandler(store).handle(make_event("TellScores"), session)

        assert result.speech_text == (
            "A has 1 point, B has 2 points, C has 3 points, and D has 4 points, "
        )
        assert result.card.title == "Leaderboard"

    def test_no_players(self, store):
        result = TellScoresHandler(store).handle(make_event("TellScores"), None)
        assert result.speech_text.startswith("Nobody has joined")


class TestHelpHandler:
    """Tests for HelpHandler."""

    def test_first_help_is_complete(self, store):
        result = HelpHandler(store).handle(make_event("Help"), None)

        assert result.speech_text == COMPLETE_HELP + " So, how can I help?"
        assert result.reprompt_text == NEXT_HELP
        assert store.load_session("S1").help_count == 1

    def test_second_help_is_short(self, store):
        handler = HelpHandler(store)
        handler.handle(make_event("Help"), None)

        result = handler.handle(make_event("Help"), store.load_session("S1"))

        assert result.speech_text == NEXT_HELP
        assert result.should_end_session is False

    def test_help_does_not_touch_game(self, store):
        session = seed(store, players={"Ann": 2})
        HelpHandler(store).handle(make_event("Help"), session)
        assert store.load_game("S1").players == {"Ann": 2}


class TestExitHandler:
    """Tests for ExitHandler."""

    def test_exit_before_scoring_nudges(self, store):
        session = seed(store, players={"Ann": 0})

        result = ExitHandler(store).handle(make_event("Exit"), session)

        assert result.speech_text == EXIT_NUDGE
        assert result.should_end_session is False
        assert store.load_session("S1").state == DialogueState.AWAITING_NAME

    def test_exit_without_session_nudges(self, store):
        result = ExitHandler(store).handle(make_event("Exit"), None)
        assert result.speech_text == EXIT_NUDGE

    def test_exit_after_scoring_ends(self, store):
        session = seed(
            store, players={"Ann": 3}, state=DialogueState.IN_GAME, needs_more_help=False
        )

        result = ExitHandler(store).handle(make_event("Exit"), session)

        assert result.speech_text == ""
        assert result.should_end_session is True
        assert store.load_session("S1").state == DialogueState.ENDED
