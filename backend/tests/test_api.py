def _new_game(client, **settings):
    res = client.post('/api/games/create', json=settings)
    assert res.status_code == 201
    return res.get_json()['game_code']


def _ready_game(client, words=('pizza', 'burger', 'taco'), **settings):
    code = _new_game(client, **settings)
    client.post(f'/api/games/{code}/word-input')
    for w in words:
        assert client.post(f'/api/games/{code}/words', json={'word': w}).status_code == 201
    return code


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert [r['name'] for r in client.get('/rounds').get_json()] == ['DESCRIBE', 'ACT_OUT', 'ONE_WORD']


def test_create_game(client):
    res = client.post('/api/games/create')
    assert res.status_code == 201
    data = res.get_json()
    assert 'game_code' in data
    state = client.get(f"/api/games/{data['game_code']}/state").get_json()
    assert state['phase'] == 'setup'
    assert state['timer']['duration'] == 60
    assert state['skip_enabled'] is True


def test_create_game_with_settings(client):
    code = _new_game(client, turn_duration=30, skip_enabled=False)
    state = client.get(f'/api/games/{code.lower()}/state').get_json()
    assert state['timer']['duration'] == 30
    assert state['skip_enabled'] is False


def test_unknown_game_is_404(client):
    res = client.get('/api/games/ZZZZ/state')
    assert res.status_code == 404
    assert res.get_json()['error'] == 'Game not found'
    assert client.post('/api/games/ZZZZ/guess').status_code == 404


def test_settings_only_before_start(client):
    code = _ready_game(client)
    res = client.post(f'/api/games/{code}/settings', json={'turn_duration': 90})
    assert res.status_code == 200
    assert res.get_json()['timer']['duration'] == 90
    assert client.post(f'/api/games/{code}/settings', json={'turn_duration': 'soon'}).status_code == 400
    client.post(f'/api/games/{code}/start')
    assert client.post(f'/api/games/{code}/settings', json={'skip_enabled': False}).status_code == 400


def test_word_validation(client):
    code = _new_game(client)
    client.post(f'/api/games/{code}/word-input')
    assert client.post(f'/api/games/{code}/words', json={'word': '   '}).status_code == 400
    assert client.post(f'/api/games/{code}/words', json={'word': 'x' * 51}).status_code == 400
    assert client.post(f'/api/games/{code}/words', json={}).status_code == 400

    first = client.post(f'/api/games/{code}/words', json={'word': 'pizza'}).get_json()
    dup = client.post(f'/api/games/{code}/words', json={'word': 'Pizza'})
    assert dup.status_code == 201
    assert dup.get_json()['warning'] == 'Word already exists'
    assert dup.get_json()['word']['id'] != first['word']['id']


def test_start_requires_three_words(client):
    code = _ready_game(client, words=('pizza', 'burger'))
    res = client.post(f'/api/games/{code}/start')
    assert res.status_code == 400
    assert client.get(f'/api/games/{code}/state').get_json()['phase'] == 'word_input'


def test_sample_words(client):
    code = _new_game(client)
    client.post(f'/api/games/{code}/word-input')
    res = client.post(f'/api/games/{code}/words/sample', json={'count': 4})
    assert res.status_code == 201
    data = res.get_json()
    assert len(data['words']) == 4
    assert data['can_start_game'] is True


def test_setup_word_input_cycle(client):
    code = _new_game(client)
    assert client.post(f'/api/games/{code}/word-input').get_json()['phase'] == 'word_input'
    assert client.post(f'/api/games/{code}/setup').get_json()['phase'] == 'setup'


def test_play_round_flow(client):
    code = _ready_game(client)
    started = client.post(f'/api/games/{code}/start').get_json()
    assert started['phase'] == 'game_overview'
    assert started['scores']['team1'] == 0
    assert started['rounds']['round']['name'] == 'DESCRIBE'

    playing = client.post(f'/api/games/{code}/round/begin').get_json()
    assert playing['phase'] == 'playing'
    assert playing['words']['current_word'] is not None
    assert playing['timer']['is_running'] is True

    skipped = client.post(f'/api/games/{code}/skip').get_json()
    assert skipped['words']['current_word'] is not None

    for _ in range(3):
        state = client.post(f'/api/games/{code}/guess').get_json()
    assert state['phase'] == 'round_transition'
    assert state['rounds']['last_transition_reason'] == 'words_exhausted'
    assert state['scores']['team1'] == 3
    assert state['scores']['team1_turn_scores'] == [0, 3]

    # Extra guesses outside play change nothing
    assert client.post(f'/api/games/{code}/guess').get_json()['scores']['team1'] == 3

    resumed = client.post(f'/api/games/{code}/turn/begin').get_json()
    assert resumed['phase'] == 'playing'
    assert resumed['rounds']['round']['name'] == 'ACT_OUT'
    assert resumed['rounds']['team'] == 1


def test_stats(client):
    code = _ready_game(client)
    client.post(f'/api/games/{code}/start')
    client.post(f'/api/games/{code}/round/begin')
    for _ in range(3):
        client.post(f'/api/games/{code}/guess')
    stats = client.get(f'/api/games/{code}/stats').get_json()
    assert stats['winner'] == 1
    assert [row['round'] for row in stats['words_per_minute']] == ['DESCRIBE']
    assert stats['words_per_minute'][0]['team2_wpm'] is None
    assert stats['round_stats']['DESCRIBE']['team1_correct'] == 3
    assert len(stats['word_statistics']) == 3


def test_reset_game(client):
    code = _ready_game(client)
    client.post(f'/api/games/{code}/start')
    client.post(f'/api/games/{code}/round/begin')
    state = client.post(f'/api/games/{code}/reset').get_json()
    assert state['phase'] == 'setup'
    assert state['words']['total'] == 0
    assert state['timer']['is_running'] is False


def test_guess_debounce(flask_app, client):
    flask_app.config['CONTROLLER_DEBOUNCE_MS'] = 60_000
    code = _ready_game(client)
    client.post(f'/api/games/{code}/start')
    client.post(f'/api/games/{code}/round/begin')
    assert client.post(f'/api/games/{code}/guess').status_code == 200
    res = client.post(f'/api/games/{code}/guess')
    assert res.status_code == 202
    assert res.get_json()['message'] == 'debounced'
    assert client.get(f'/api/games/{code}/state').get_json()['scores']['team1'] == 1


def test_scheduler_runs_turn_to_expiry_in_tests(flask_app, client):
    flask_app.config['ENABLE_SCHEDULER_IN_TESTS'] = True
    code = _ready_game(client, turn_duration=10)
    client.post(f'/api/games/{code}/start')
    # With TESTING the timer worker runs inline, so the whole turn elapses
    state = client.post(f'/api/games/{code}/round/begin').get_json()
    assert state['phase'] == 'round_transition'
    assert state['rounds']['last_transition_reason'] == 'timer_expired'
    assert state['rounds']['team'] == 2
    assert state['scores']['team1_turn_scores'] == [0, 0]


def test_stats_route_matches_game_stats(client):
    from nouns.services.games import sessions
    code = _ready_game(client)
    client.post(f'/api/games/{code}/start')
    client.post(f'/api/games/{code}/round/begin')
    client.post(f'/api/games/{code}/guess')
    assert client.get(f'/api/games/{code}/stats').get_json() == sessions.get_game(code).get_stats()


def test_delete_game_forgets_debounce_state(flask_app, client):
    from nouns.api import games as games_api
    flask_app.config['CONTROLLER_DEBOUNCE_MS'] = 60_000
    code = _ready_game(client)
    client.post(f'/api/games/{code}/start')
    client.post(f'/api/games/{code}/round/begin')
    client.post(f'/api/games/{code}/guess')
    client.post(f'/api/games/{code}/skip')
    assert f'guess:{code}' in games_api._last_controller_action
    client.delete(f'/api/games/{code}')
    assert f'guess:{code}' not in games_api._last_controller_action
    assert f'skip:{code}' not in games_api._last_controller_action


def test_delete_game(client):
    code = _new_game(client)
    assert client.delete(f'/api/games/{code}').status_code == 200
    assert client.get(f'/api/games/{code}/state').status_code == 404
    assert client.delete(f'/api/games/{code}').status_code == 404
