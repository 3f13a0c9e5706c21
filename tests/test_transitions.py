from datetime import datetime, timedelta, timezone

import pytest

from saltong.models.errors import GameAlreadyEndedError, IncompleteGuessError
from saltong.models.game import GameStatus, ModeGameData
from saltong.services.transitions import start_new_puzzle, submit

NOW = datetime(2022, 3, 1, 8, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fresh():
    return ModeGameData(game_id='2022-03-01', correct_answer='APPLE')


def test_first_attempt_records_game_start(fresh):
    state = submit(fresh, 'ALLOP', 6, now=NOW)
    state = submit(state, 'PLANE', 6, now=NOW + timedelta(seconds=30))

    assert state.game_start_date == NOW
    assert len(state.history) == 2
    assert state.game_status == GameStatus.playing
    assert state.num_played == 0


def test_submit_returns_new_snapshot(fresh):
    state = submit(fresh, 'ALLOP', 6, now=NOW)

    assert fresh.history == ()
    assert fresh.game_start_date is None
    assert state is not fresh


def test_win_updates_counters_streak_and_histogram(fresh):
    before = ModeGameData(
        game_id='2022-03-01', correct_answer='APPLE',
        num_wins=3, num_played=4, win_streak=2, longest_win_streak=2, turn_stats={3: 1, 4: 2}
    )
    state = submit(before, 'ALLOP', 6, now=NOW)
    state = submit(state, 'PLANE', 6, now=NOW + timedelta(seconds=20))
    won_at = NOW + timedelta(seconds=45)
    state = submit(state, 'apple', 6, now=won_at)

    assert state.game_status == GameStatus.win
    assert state.num_wins == 4
    assert state.num_played == 5
    assert state.win_streak == 3
    assert state.longest_win_streak == 3
    assert state.last_win_date == won_at
    assert state.turn_stats == {3: 2, 4: 2}
    assert before.turn_stats == {3: 1, 4: 2}


def test_longest_streak_never_decreases():
    before = ModeGameData(game_id='g', correct_answer='APPLE', num_wins=6, num_played=8,
                          win_streak=1, longest_win_streak=5)
    state = submit(before, 'APPLE', 6, now=NOW)

    assert state.win_streak == 2
    assert state.longest_win_streak == 5
    assert state.turn_stats == {1: 1}


def test_running_out_of_tries_loses(fresh):
    state = ModeGameData(game_id='g', correct_answer='APPLE', num_wins=2, num_played=2,
                         win_streak=2, longest_win_streak=2, turn_stats={2: 2})
    for _ in range(6):
        state = submit(state, 'BERRY', 6, now=NOW)

    assert state.game_status == GameStatus.lose
    assert len(state.history) == 6
    assert state.num_played == 3
    assert state.num_wins == 2
    assert state.win_streak == 0
    assert state.longest_win_streak == 2
    assert state.turn_stats == {2: 2}


def test_finished_game_rejects_further_guesses(fresh):
    state = fresh
    for _ in range(6):
        state = submit(state, 'BERRY', 6, now=NOW)

    with pytest.raises(GameAlreadyEndedError):
        submit(state, 'APPLE', 6, now=NOW)

    won = submit(fresh, 'APPLE', 6, now=NOW)
    with pytest.raises(GameAlreadyEndedError):
        submit(won, 'APPLE', 6, now=NOW)


def test_incomplete_guess_is_not_recorded(fresh):
    state = submit(fresh, 'ALLOP', 6, now=NOW)

    with pytest.raises(IncompleteGuessError) as exc_info:
        submit(state, 'APP', 6, now=NOW)

    assert exc_info.value.expected_length == 5
    assert len(state.history) == 1


def test_start_new_puzzle_keeps_statistics(fresh):
    state = submit(fresh, 'APPLE', 6, now=NOW)
    rolled = start_new_puzzle(state, '2022-03-02', 'berry')

    assert rolled.game_id == '2022-03-02'
    assert rolled.correct_answer == 'BERRY'
    assert rolled.game_status == GameStatus.playing
    assert rolled.history == ()
    assert rolled.game_start_date is None
    assert rolled.num_wins == 1
    assert rolled.num_played == 1
    assert rolled.win_streak == 1
    assert rolled.turn_stats == {1: 1}
    assert rolled.last_win_date == NOW
