def test_health_reports_active_rooms(client, registry):
    res = client.get('/health')
    assert res.status_code == 200
    assert res.get_json() == {'status': 'ok', 'activeRoomCount': 0}

    registry.get_or_create('r1')
    registry.get_or_create('r2')

    res = client.get('/api/health')
    assert res.status_code == 200
    assert res.get_json() == {'status': 'ok', 'activeRoomCount': 2}


def test_health_does_not_create_rooms(client, registry):
    client.get('/health')
    assert len(registry) == 0


def test_room_snapshot(client, registry):
    room = registry.get_or_create('r1')
    room.join('a', 'Alice')
    room.join('b', 'Bob')
    room.start()

    res = client.get('/api/rooms/r1')
    assert res.status_code == 200
    data = res.get_json()
    assert data['roomId'] == 'r1'
    assert data['gameState'] == 'playing'
    assert data['round'] == 1
    assert data['currentDrawer'] == 'a'
    assert data['scores'] == {'a': 0, 'b': 0}
    assert 'currentWord' not in data


def test_room_snapshot_missing(client, registry):
    res = client.get('/api/rooms/nope')
    assert res.status_code == 404
    assert res.get_json() == {'error': 'room_not_found'}
    assert len(registry) == 0
