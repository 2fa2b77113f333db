from flask import Blueprint, jsonify, request, current_app, abort
from nouns import socketio
from nouns.models import WordValidationResult
from nouns.services.games import sessions
from nouns.services.games.scheduler import (
    emit_state_update,
    room_for,
    schedule_turn_timer as svc_schedule_turn_timer,
)
import time


games = Blueprint('games', __name__)

_last_controller_action: dict[str, float] = {}


def _get_game_or_404(game_code):
    game = sessions.get_game(game_code)
    if game is None:
        abort(404, description='Game not found')
    return game


def _state_response(game, status=200, **extra):
    payload = game.to_dict()
    payload.update(extra)
    return jsonify(payload), status


def _debounced(action, game_code):
    try:
        debounce_ms = int(current_app.config.get('CONTROLLER_DEBOUNCE_MS', 0))
    except (TypeError, ValueError):
        debounce_ms = 0
    if debounce_ms <= 0:
        return False
    key = f"{action}:{game_code.upper()}"
    now = time.time() * 1000.0
    last = _last_controller_action.get(key, 0)
    if now - last < debounce_ms:
        return True
    _last_controller_action[key] = now
    return False


def _parse_bool(value):
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'yes', 'on')
    return bool(value)


def _schedule_turn_timer(game) -> None:
    svc_schedule_turn_timer(current_app._get_current_object(), game.game_code)


@games.errorhandler(404)
def not_found(err):
    return jsonify({'error': getattr(err, 'description', 'Not found')}), 404


@games.route('/create', methods=['POST'])
def create_game():
    data = request.get_json(silent=True) or {}
    cfg = current_app.config
    try:
        duration = int(data.get('turn_duration', cfg.get('TURN_DURATION_SEC', 60)))
    except (TypeError, ValueError):
        return jsonify({'error': 'turn_duration must be a number of seconds'}), 400
    skip_enabled = _parse_bool(data.get('skip_enabled', cfg.get('SKIP_ENABLED', True)))
    game = sessions.create_game(turn_duration=duration, skip_enabled=skip_enabled)
    return jsonify({
        'message': 'New game created!',
        'game_code': game.game_code
    }), 201


@games.route('/<string:game_code>/state', methods=['GET'])
def get_game_state(game_code):
    game = _get_game_or_404(game_code)
    return _state_response(game)


@games.route('/<string:game_code>/settings', methods=['POST'])
def update_settings(game_code):
    game = _get_game_or_404(game_code)
    data = request.get_json(silent=True) or {}
    duration = data.get('turn_duration')
    if duration is not None:
        try:
            duration = int(duration)
        except (TypeError, ValueError):
            return jsonify({'error': 'turn_duration must be a number of seconds'}), 400
    skip = data.get('skip_enabled')
    applied = game.update_settings(
        turn_duration=duration,
        skip_enabled=_parse_bool(skip) if skip is not None else None,
    )
    if not applied:
        return jsonify({'error': 'Settings can only change before the game starts'}), 400
    emit_state_update(game)
    return _state_response(game)


@games.route('/<string:game_code>/word-input', methods=['POST'])
def proceed_to_word_input(game_code):
    game = _get_game_or_404(game_code)
    if game.proceed_to_word_input():
        emit_state_update(game)
    return _state_response(game)


@games.route('/<string:game_code>/setup', methods=['POST'])
def go_to_setup(game_code):
    game = _get_game_or_404(game_code)
    if game.go_to_setup():
        emit_state_update(game)
    return _state_response(game)


@games.route('/<string:game_code>/words', methods=['POST'])
def add_word(game_code):
    game = _get_game_or_404(game_code)
    data = request.get_json(silent=True) or {}
    text = data.get('word')
    if not isinstance(text, str):
        return jsonify({'error': 'word is required'}), 400

    result = game.validate_word(text)
    if result in (WordValidationResult.EMPTY, WordValidationResult.TOO_LONG):
        return jsonify({'error': result.error_message}), 400

    word = game.add_word(text)
    if word is None:
        return jsonify({'error': 'Words can only be added before the game starts'}), 400

    current_app.logger.info(f"[word-added] game={game.game_code} word={word.id}")
    emit_state_update(game)
    body = {'word': word.to_dict(), 'can_start_game': game.can_start_game()}
    if result is WordValidationResult.DUPLICATE:
        body['warning'] = result.error_message
    return jsonify(body), 201


@games.route('/<string:game_code>/words/sample', methods=['POST'])
def add_sample_words(game_code):
    game = _get_game_or_404(game_code)
    data = request.get_json(silent=True) or {}
    try:
        count = int(data.get('count', current_app.config.get('SAMPLE_WORD_COUNT', 5)))
    except (TypeError, ValueError):
        return jsonify({'error': 'count must be an integer'}), 400
    added = game.add_sample_words(count)
    emit_state_update(game)
    return jsonify({
        'words': [w.to_dict() for w in added],
        'can_start_game': game.can_start_game(),
    }), 201


@games.route('/<string:game_code>/start', methods=['POST'])
def start_game(game_code):
    game = _get_game_or_404(game_code)
    if not game.can_start_game():
        return jsonify({'error': 'At least 3 words are required to start'}), 400
    if game.start_game():
        emit_state_update(game)
    return _state_response(game)


@games.route('/<string:game_code>/round/begin', methods=['POST'])
def begin_round(game_code):
    game = _get_game_or_404(game_code)
    if game.begin_round():
        emit_state_update(game)
        _schedule_turn_timer(game)
    return _state_response(game)


@games.route('/<string:game_code>/turn/begin', methods=['POST'])
def begin_next_turn(game_code):
    game = _get_game_or_404(game_code)
    if game.begin_next_turn():
        emit_state_update(game)
        _schedule_turn_timer(game)
    return _state_response(game)


@games.route('/<string:game_code>/guess', methods=['POST'])
def word_guessed(game_code):
    game = _get_game_or_404(game_code)
    if _debounced('guess', game_code):
        return jsonify({'message': 'debounced'}), 202
    if game.word_guessed():
        emit_state_update(game)
    return _state_response(game)


@games.route('/<string:game_code>/skip', methods=['POST'])
def skip_word(game_code):
    game = _get_game_or_404(game_code)
    if _debounced('skip', game_code):
        return jsonify({'message': 'debounced'}), 202
    if game.skip_current_word():
        emit_state_update(game)
    return _state_response(game)


@games.route('/<string:game_code>/reset', methods=['POST'])
def reset_game(game_code):
    game = _get_game_or_404(game_code)
    game.reset_game()
    emit_state_update(game)
    return _state_response(game)


@games.route('/<string:game_code>/stats', methods=['GET'])
def get_stats(game_code):
    game = _get_game_or_404(game_code)
    return jsonify(game.get_stats())


@games.route('/<string:game_code>', methods=['DELETE'])
def end_game(game_code):
    game = sessions.end_game(game_code)
    if game is None:
        return jsonify({'error': 'Game not found'}), 404
    for action in ('guess', 'skip'):
        _last_controller_action.pop(f"{action}:{game.game_code}", None)
    socketio.emit('session_ended', {'game_code': game.game_code}, to=room_for(game.game_code), namespace='/ws')
    return jsonify({'message': f'Game {game.game_code} ended'})
