def test_get_state_defaults_to_main(client):
    response = client.get('/api/game')
    data = response.get_json()

    assert response.status_code == 200
    assert data['success'] is True
    assert data['state']['mode'] == 'main'
    assert data['state']['correctAnswer'] is None


def test_unknown_mode_falls_back_to_main(client):
    data = client.get('/api/game/SUPER').get_json()

    assert data['state']['mode'] == 'main'
    assert client.get('/api/game/MINI').get_json()['state']['wordLength'] == 4


def test_guess_requires_body(client):
    response = client.post('/api/game/main/guess', json={})

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Guess is required'


def test_incomplete_guess_reports_expected_length(client):
    response = client.post('/api/game/max/guess', json={'guess': 'ARAW'})
    data = response.get_json()

    assert response.status_code == 400
    assert data['success'] is False
    assert data['expected_length'] == 7


def test_winning_guess_then_game_over(client):
    response = client.post('/api/game/main/guess', json={'guess': 'allop'})
    state = response.get_json()['state']

    assert response.status_code == 200
    assert state['gameStatus'] == 'playing'
    assert state['history'][0]['word'][1] == ['L', 'wrongSpot']
    assert state['letterStatuses']['A'] == 'correct'
    assert state['correctAnswer'] is None

    state = client.post('/api/game/main/guess', json={'guess': 'APPLE'}).get_json()['state']
    assert state['gameStatus'] == 'win'
    assert state['correctAnswer'] == 'APPLE'
    assert state['turnStats'] == {'2': 1}

    response = client.post('/api/game/main/guess', json={'guess': 'APPLE'})
    assert response.status_code == 409


def test_share_text(client):
    assert client.get('/api/game/mini/share').status_code == 409

    for _ in range(5):
        client.post('/api/game/mini/guess', json={'guess': 'BATO'})

    response = client.get('/api/game/mini/share?theme=dark&showTimeSolved=true')
    text = response.get_json()['text']

    assert response.status_code == 200
    assert text.startswith('Saltong Mini 2022-03-01 (X/5)\n\n⬛🟨⬛⬛')
    assert text.endswith('saltong.carldegs.com/mini')


def test_reset_clears_statistics(client):
    client.post('/api/game/main/guess', json={'guess': 'APPLE'})

    response = client.post('/api/reset')
    state = client.get('/api/game/main').get_json()['state']

    assert response.status_code == 200
    assert state['numWins'] == 0
    assert state['history'] == []
    assert state['gameStatus'] == 'playing'


def test_health_check(client):
    response = client.get('/api/health')
    data = response.get_json()

    assert response.status_code == 200
    assert data['status'] == 'healthy'
    assert data['storage_backend'] == 'MemoryStorage'
