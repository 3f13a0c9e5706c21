from datetime import datetime, timedelta, timezone

from saltong.models.game import GameStatus, LetterStatus, ModeGameData
from saltong.services.scoring import score_attempt
from saltong.services.stats import letter_statuses, solve_duration, time_solved, win_percentage

START = datetime(2022, 3, 1, 8, 0, 0, tzinfo=timezone.utc)


def test_win_percentage():
    assert win_percentage(ModeGameData()) is None
    assert win_percentage(ModeGameData(num_wins=2, num_played=3)) == 66.7
    assert win_percentage(ModeGameData(num_wins=4, num_played=4)) == 100.0


def test_time_solved_formats():
    assert time_solved(START, START + timedelta(seconds=75)) == '1:15'
    assert time_solved(START, START + timedelta(seconds=5)) == '0:05'
    assert time_solved(START, START + timedelta(hours=1, minutes=2, seconds=5)) == '1:02:05'


def test_time_solved_unavailable():
    assert time_solved(None, START) is None
    assert time_solved(START, None) is None
    assert time_solved(START, START - timedelta(days=1)) is None


def test_solve_duration_only_for_won_games():
    finished = START + timedelta(seconds=90)
    won = ModeGameData(game_status=GameStatus.win, game_start_date=START, last_win_date=finished)
    lost = ModeGameData(game_status=GameStatus.lose, game_start_date=START, last_win_date=finished)

    assert solve_duration(won) == '1:30'
    assert solve_duration(lost) is None


def test_letter_statuses_keep_best_status():
    history = [
        score_attempt('ALLOP', 'APPLE'),
        score_attempt('PLANE', 'APPLE'),
    ]
    statuses = letter_statuses(history)

    assert statuses['A'] == LetterStatus.correct
    assert statuses['L'] == LetterStatus.wrongSpot
    assert statuses['O'] == LetterStatus.wrong
    assert statuses['P'] == LetterStatus.wrongSpot
    assert statuses['N'] == LetterStatus.wrong
    assert statuses['E'] == LetterStatus.correct
    assert letter_statuses([]) == {}
