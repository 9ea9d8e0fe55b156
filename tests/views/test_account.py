'''Test the authentication and account endpoints.'''

pytest_plugins = ['tests.db_fixtures.account', 'tests.db_fixtures.report']


class TestRegister:
    def test_member(self, client, store):
        response = client.post('/register', json={'username': 'carol', 'password': 'pw'})
        assert response.status_code == 200

        body = response.get_json()
        assert body['username'] == 'carol'
        assert body['role'] == 'member'
        assert body['points'] == 0
        assert 'passwordHash' not in body
        assert body['csrfToken']
        assert store.get_user('carol') is not None

    def test_admin_code(self, client):
        response = client.post('/register', json={'username': 'dan', 'password': 'pw',
                                                   'admin_code': '1234'})
        assert response.get_json()['role'] == 'admin'

    def test_duplicate(self, client, alice):
        response = client.post('/register', json={'username': 'alice', 'password': 'pw'})
        assert response.status_code == 400
        assert response.get_json() == {'message': 'Username already exists.'}

    def test_username_too_long(self, client, store):
        response = client.post('/register', json={'username': 'z' * 65, 'password': 'pw'})
        assert response.status_code == 400
        assert store.list_users() == []

    def test_missing_password(self, client):
        response = client.post('/register', json={'username': 'eve'})
        assert response.status_code == 400


class TestLogin:
    def test_wrong_password(self, client, alice):
        response = client.post('/login', json={'username': 'alice', 'password': 'nope'})
        assert response.status_code == 401

    def test_logout(self, client, logged_in_alice):
        assert client.get('/logout').status_code == 204
        assert client.get('/api/v1/account').status_code == 401


class TestGetInfo:
    '''Test the `/account` endpoint (and its alias, `/accounts/:username`)'''

    def test_self(self, client, logged_in_alice):
        user, _csrf_token = logged_in_alice
        response_data = client.json('/api/v1/account')
        expected_data = {
            'username': user.username,
            'role': 'member',
            'points': 0,
            'memberSince': user.member_since,
            'profilePic': None,
        }
        assert response_data == expected_data

    def test_other_user(self, client, logged_in_alice, bob):
        assert client.json('/api/v1/accounts/bob')['role'] == 'admin'

    def test_unknown_user(self, client, logged_in_alice):
        assert client.get('/api/v1/accounts/nobody').status_code == 404

    def test_without_login(self, client):
        assert client.get('/api/v1/account').status_code == 401


def test_profile_pic(client, store, logged_in_alice):
    response = client.patch('/api/v1/account/profile_pic',
                            json={'profilePic': 'data:image/png;base64,AAAA'})
    assert response.status_code == 200
    assert response.get_json()['profilePic'] == 'data:image/png;base64,AAAA'
    assert store.get_user('alice').profile_pic == 'data:image/png;base64,AAAA'


def test_timeline(client, logged_in_bob, alice_report):
    client.patch(f'/api/v1/reports/{alice_report.id}/status', json={'status': 'Verified'})

    timeline = client.json('/api/v1/accounts/alice/timeline')
    assert [entry['type'] for entry in timeline] == ['verify', 'submit']
    assert timeline[0] == {
        'id': timeline[0]['id'],
        'username': 'alice',
        'type': 'verify',
        'targetTitle': alice_report.title,
        'pointsChange': 50,
        'date': timeline[0]['date'],
    }
    assert client.json('/api/v1/account/timeline') == []


def test_csrf_token_required(app, client, logged_in_alice):
    app.config['CSRF_ENABLED'] = True
    _user, csrf_token = logged_in_alice
    payload = {'profilePic': None}

    assert client.patch('/api/v1/account/profile_pic', json=payload).status_code == 403
    response = client.patch('/api/v1/account/profile_pic', json=payload,
                            headers={'X-CSRF-Token': csrf_token})
    assert response.status_code == 200
