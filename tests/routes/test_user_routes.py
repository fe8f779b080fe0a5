from harmonic.models.user import User


def test_upsert_user_twice_keeps_single_record(client, session) -> None:
    body = {'email': 'new@x.com', 'role': 'student'}

    first = client.put('/users/new@x.com', json=body)
    second = client.put('/users/new@x.com', json=body)

    assert first.status_code == 200
    assert second.status_code == 200
    assert first.json() == second.json()
    assert session.query(User).filter(User.email == 'new@x.com').count() == 1

    fetched = client.get('/users/new@x.com')
    assert fetched.status_code == 200
    assert fetched.json()['role'] == 'student'


def test_upsert_user_updates_only_supplied_fields(client) -> None:
    client.put('/users/new@x.com', json={'name': 'New User', 'photoUrl': 'https://img/1.png'})

    response = client.put('/users/NEW@x.com', json={'role': 'instructor'})

    assert response.status_code == 200
    body = response.json()
    assert body['email'] == 'new@x.com'
    assert body['name'] == 'New User'
    assert body['photoUrl'] == 'https://img/1.png'
    assert body['role'] == 'instructor'


def test_upsert_user_rejects_mismatched_body_email(client) -> None:
    response = client.put('/users/new@x.com', json={'email': 'other@x.com'})

    assert response.status_code == 400


def test_upsert_user_rejects_unknown_role(client) -> None:
    response = client.put('/users/new@x.com', json={'role': 'superuser'})

    assert response.status_code == 422


def test_get_unknown_user_returns_not_found(client) -> None:
    response = client.get('/users/ghost@x.com')

    assert response.status_code == 404


def test_list_users_requires_authentication(client, seed, auth_headers) -> None:
    seed(User(email='a@x.com', role='student'), User(email='b@x.com', role='admin'))

    assert client.get('/users').status_code == 401

    response = client.get('/users', headers=auth_headers('b@x.com'))
    assert response.status_code == 200
    assert [user['email'] for user in response.json()] == ['a@x.com', 'b@x.com']


def test_top_instructor_returns_at_most_six_instructors(client, seed) -> None:
    seed(
        *[User(email=f'instructor{index}@x.com', role='instructor') for index in range(8)],
        User(email='student@x.com', role='student'),
    )

    response = client.get('/topInstructor')

    assert response.status_code == 200
    body = response.json()
    assert len(body) == 6
    assert {user['role'] for user in body} == {'instructor'}


def test_top_instructor_by_role_is_unlimited(client, seed) -> None:
    seed(
        *[User(email=f'instructor{index}@x.com', role='instructor') for index in range(8)],
        User(email='admin@x.com', role='admin'),
    )

    assert len(client.get('/topInstructor/instructor').json()) == 8
    assert [user['email'] for user in client.get('/topInstructor/admin').json()] == ['admin@x.com']
    unknown_role = client.get('/topInstructor/janitor')
    assert unknown_role.status_code == 200
    assert unknown_role.json() == []
