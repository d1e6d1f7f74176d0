"""Tests for the facade the Qt shell drives."""

import pytest

from quizgame.core.errors import AuthFailure, InvalidArgument, InvalidState
from quizgame.core.models import Difficulty, LeaderboardRow


def _wrong_option(question):
    return next(option for option in question.options if option != question.correct_option)


def _play(session, correct_answers):
    for index in range(session.question_count):
        question = session.current_question()
        if index < correct_answers:
            session.submit_answer(question.correct_option)
        else:
            session.submit_answer(_wrong_option(question))


class TestLogin:
    def test_login_sets_current_player(self, game_manager):
        game_manager.register("alice", "secret")
        player = game_manager.login("alice", "secret")
        assert game_manager.current_player == player
        assert player.username == "alice"
        assert game_manager.is_logged_in()

    def test_failed_login_keeps_previous_state(self, game_manager):
        game_manager.register("alice", "secret")
        with pytest.raises(AuthFailure):
            game_manager.login("alice", "wrong")
        assert game_manager.current_player is None

    def test_logout_drops_player_and_session(self, game_manager):
        game_manager.register("alice", "secret")
        game_manager.login("alice", "secret")
        game_manager.start_quiz(Difficulty.EASY)
        game_manager.logout()
        assert game_manager.current_player is None
        assert game_manager.active_session is None


class TestQuizFlow:
    def test_start_quiz_uses_strict_answers(self, game_manager):
        session = game_manager.start_quiz(Difficulty.HARD)
        assert session.strict_answers
        with pytest.raises(InvalidArgument):
            session.submit_answer("nothing selected")

    def test_start_quiz_replaces_running_session(self, game_manager):
        first = game_manager.start_quiz(Difficulty.EASY)
        first.submit_answer(first.current_question().correct_option)
        second = game_manager.start_quiz(Difficulty.MEDIUM)
        assert game_manager.active_session is second
        assert second.current_index == 0

    def test_finish_before_start_is_invalid(self, game_manager):
        with pytest.raises(InvalidState):
            game_manager.finish_quiz()

    def test_finish_before_completion_is_invalid(self, game_manager):
        game_manager.register("alice", "secret")
        game_manager.login("alice", "secret")
        game_manager.start_quiz(Difficulty.EASY)
        with pytest.raises(InvalidState):
            game_manager.finish_quiz()
        assert game_manager.leaderboard() == []

    def test_completed_quiz_is_saved_once(self, game_manager):
        game_manager.register("alice", "secret")
        game_manager.login("alice", "secret")
        _play(game_manager.start_quiz(Difficulty.MEDIUM), correct_answers=7)
        record = game_manager.finish_quiz()
        assert record.score == 7
        with pytest.raises(InvalidState):
            game_manager.finish_quiz()
        assert game_manager.leaderboard() == [LeaderboardRow("alice", "Medium", 7)]

    def test_anonymous_score_is_discarded(self, game_manager):
        _play(game_manager.start_quiz(Difficulty.EASY), correct_answers=3)
        assert game_manager.finish_quiz() is None
        assert game_manager.leaderboard() == []

    def test_scores_follow_the_logged_in_player(self, game_manager):
        game_manager.register("alice", "a")
        game_manager.register("bob", "b")

        game_manager.login("bob", "b")
        _play(game_manager.start_quiz(Difficulty.HARD), correct_answers=2)
        game_manager.finish_quiz()
        game_manager.logout()

        game_manager.login("alice", "a")
        _play(game_manager.start_quiz(Difficulty.HARD), correct_answers=6)
        game_manager.finish_quiz()

        assert game_manager.leaderboard() == [
            LeaderboardRow("alice", "Hard", 6),
            LeaderboardRow("bob", "Hard", 2),
        ]


def test_register_login_play_and_list_scores(game_manager):
    game_manager.register("bob", "pw1")
    player = game_manager.login("bob", "pw1")
    assert player.account.username == "bob"

    session = game_manager.start_quiz(Difficulty.EASY)
    assert session.question_count == 8
    _play(session, correct_answers=5)
    assert session.is_complete()
    assert session.final_score() == 5

    record = game_manager.scores.record_score(player.account_id, "Easy", session.final_score())
    assert record.score == 5
    assert LeaderboardRow(username="bob", difficulty="Easy", score=5) in game_manager.leaderboard()
