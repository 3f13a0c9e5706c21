"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..models.errors import GameAlreadyEndedError, GameNotFinishedError, IncompleteGuessError
from ..models.game import GameStatus
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_bool, resolve_game_mode

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


@game_bp.route('/game', defaults={'slug': None}, methods=['GET'])
@game_bp.route('/game/<slug>', methods=['GET'])
def get_state(slug):
    """Get the current state of a puzzle mode."""
    mode = resolve_game_mode(slug)
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', mode.value)

        response_data = {
            'success': True,
            'state': game_service.get_state(mode)
        }

        game_logger.log_server_response(request, 'get_state', True, response_data, mode.value)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', mode.value)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, mode.value)
        return jsonify(error_response), 500


@game_bp.route('/game/<slug>/guess', methods=['POST'])
def make_guess(slug):
    """Submit a guess for evaluation."""
    mode = resolve_game_mode(slug)
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not data or not isinstance(data.get('guess'), str):
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, mode.value)
            return jsonify(error_response), 400

        guess = data['guess']

        game_logger.log_user_action(
            request, 'submit_guess', mode.value,
            guess=guess, guess_length=len(guess)
        )

        try:
            mode_data = game_service.submit(guess, mode)
        except IncompleteGuessError as e:
            error_response = {
                'success': False,
                'error': str(e),
                'expected_length': e.expected_length
            }
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, mode.value,
                validation_error=str(e), attempted_guess=guess
            )
            return jsonify(error_response), 400
        except GameAlreadyEndedError as e:
            error_response = {
                'success': False,
                'error': str(e)
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, mode.value)
            return jsonify(error_response), 409

        response_data = {
            'success': True,
            'state': game_service.public_state(mode, mode_data)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, mode.value,
            guess=guess, attempt=len(mode_data.history), game_status=mode_data.game_status.value
        )

        # Log special game events
        if mode_data.game_status == GameStatus.win:
            game_logger.log_game_event(
                mode_data.game_id, 'game_won', request.remote_addr,
                mode=mode.value, attempts_used=len(mode_data.history),
                target_word=mode_data.correct_answer, win_streak=mode_data.win_streak
            )
        elif mode_data.game_status == GameStatus.lose:
            game_logger.log_game_event(
                mode_data.game_id, 'game_lost', request.remote_addr,
                mode=mode.value, attempts_used=len(mode_data.history),
                target_word=mode_data.correct_answer, final_guess=guess
            )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', mode.value)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, mode.value)
        return jsonify(error_response), 500


@game_bp.route('/game/<slug>/share', methods=['GET'])
def get_share_text(slug):
    """Get the share text of a finished game."""
    mode = resolve_game_mode(slug)
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        show_time_solved = parse_bool(request.args.get('showTimeSolved'))
        theme = request.args.get('theme', 'light')

        game_logger.log_user_action(
            request, 'share', mode.value,
            show_time_solved=show_time_solved, theme=theme
        )

        try:
            text = game_service.get_share_text(mode, show_time_solved=show_time_solved, theme=theme)
        except GameNotFinishedError as e:
            error_response = {
                'success': False,
                'error': str(e)
            }
            game_logger.log_server_response(request, 'share', False, error_response, mode.value)
            return jsonify(error_response), 409

        response_data = {
            'success': True,
            'text': text
        }
        game_logger.log_server_response(request, 'share', True, response_data, mode.value)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'share', mode.value)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'share', False, error_response, mode.value)
        return jsonify(error_response), 500


@game_bp.route('/reset', methods=['POST'])
def reset_user_data():
    """Erase all game data and statistics of this installation."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'reset')

        game_service.reset_all()

        response_data = {
            'success': True
        }
        game_logger.log_server_response(request, 'reset', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'reset')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'reset', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'game_service_available': game_service is not None,
            'storage_backend': type(game_service.persistence.storage).__name__ if game_service else None,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
