"""
Share Formatter

Renders the emoji summary players paste after finishing a puzzle.
"""

from ..config.game_settings import MODE_TITLES
from ..models.game import GameMode, GameStatus, LetterStatus, ModeGameData
from .stats import solve_duration

DEFAULT_DOMAIN = 'saltong.carldegs.com'

_GLYPHS = {
    LetterStatus.correct: '🟩',
    LetterStatus.wrongSpot: '🟨',
}
_WRONG_GLYPHS = {
    'dark': '⬛',
    'light': '⬜',
}


def format_share(mode_state: ModeGameData, mode: GameMode, num_tries: int,
                 show_time_solved: bool = False, theme: str = 'light',
                 domain: str = DEFAULT_DOMAIN) -> str:
    """
    Builds the share text of a finished game.

    The caller guarantees the game is over: the score line reads the number
    of attempts on a win and ``X`` otherwise.

    Args:
        mode_state: Final state of the mode
        mode: Puzzle mode, selects the title and the link path
        num_tries: Try limit shown as the score denominator
        show_time_solved: Append the solve time when it is known
        theme: ``dark`` or ``light``, selects the glyph of wrong letters
        domain: Site address printed on the last line

    Returns:
        str: Header, emoji grid and site link separated by blank lines
    """
    mode = GameMode(mode)
    wrong_glyph = _WRONG_GLYPHS.get(theme, _WRONG_GLYPHS['light'])

    grid = '\n'.join(
        ''.join(_GLYPHS.get(status, wrong_glyph) for status in attempt.statuses)
        for attempt in mode_state.history
    )

    won = mode_state.game_status == GameStatus.win
    score_text = f"{len(mode_state.history) if won else 'X'}/{num_tries}"

    if won:
        time_text = ''
        elapsed = solve_duration(mode_state)
        if show_time_solved and elapsed:
            time_text = f"  ⌛{elapsed}"
        status_text = f"\n🏅{score_text}{time_text}"
    else:
        status_text = f" ({score_text})"

    link = domain if mode == GameMode.main else f"{domain}/{mode.value}"

    return f"{MODE_TITLES[mode.value]} {mode_state.game_id}{status_text}\n\n{grid}\n\n{link}"
