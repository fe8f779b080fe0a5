from harmonic.models.course_class import CourseClass


def _course_class(name: str, instructor_email: str, **overrides) -> CourseClass:
    values = {
        'name': name,
        'instructor_name': 'Instructor',
        'instructor_email': instructor_email,
        'available_seats': 10,
        'price': 25,
        'status': 'pending',
        'enrolled_student_count': 0,
    }
    values.update(overrides)
    return CourseClass(**values)


def test_instructor_sees_only_own_classes(client, seed, auth_headers) -> None:
    seed(
        _course_class('Guitar Basics', 'a@x.com'),
        _course_class('Piano Basics', 'b@x.com'),
        _course_class('Guitar Solo', 'a@x.com'),
    )

    response = client.get('/classes/a@x.com', headers=auth_headers('a@x.com'))

    assert response.status_code == 200
    body = response.json()
    assert sorted(item['name'] for item in body) == ['Guitar Basics', 'Guitar Solo']
    assert {item['instructorEmail'] for item in body} == {'a@x.com'}


def test_instructor_classes_of_another_identity_are_forbidden(client, seed, auth_headers) -> None:
    seed(_course_class('Guitar Basics', 'a@x.com'))

    response = client.get('/classes/a@x.com', headers=auth_headers('b@x.com'))

    assert response.status_code == 403
    assert 'Guitar Basics' not in response.text


def test_instructor_classes_require_bearer_token(client) -> None:
    response = client.get('/classes/a@x.com')

    assert response.status_code == 401
    assert response.headers['www-authenticate'] == 'Bearer'


def test_instructor_classes_reject_invalid_token(client) -> None:
    response = client.get('/classes/a@x.com', headers={'Authorization': 'Bearer nonsense'})

    assert response.status_code == 401
    assert response.json() == {'detail': 'Invalid token'}


def test_list_all_classes_requires_authentication(client, seed, auth_headers) -> None:
    seed(_course_class('Guitar Basics', 'a@x.com'), _course_class('Piano Basics', 'b@x.com'))

    assert client.get('/classes').status_code == 401

    response = client.get('/classes', headers=auth_headers('admin@x.com'))
    assert response.status_code == 200
    assert len(response.json()) == 2


def test_approved_classes_are_public(client, seed) -> None:
    seed(
        _course_class('Guitar Basics', 'a@x.com', status='approved'),
        _course_class('Piano Basics', 'b@x.com'),
        _course_class('Drums', 'b@x.com', status='denied'),
    )

    response = client.get('/classes/approved')

    assert response.status_code == 200
    assert [item['name'] for item in response.json()] == ['Guitar Basics']


def test_popular_classes_returns_top_six_by_enrollment(client, seed) -> None:
    counts = [3, 12, 0, 7, 25, 1, 9, 4]
    seed(*[_course_class(f'Class {count}', 'a@x.com', enrolled_student_count=count) for count in counts])

    response = client.get('/popularClasses')

    assert response.status_code == 200
    returned_counts = [item['enrolledStudentCount'] for item in response.json()]
    assert returned_counts == [25, 12, 9, 7, 4, 3]


def test_create_class_defaults_to_pending(client) -> None:
    response = client.post(
        '/classes',
        json={
            'name': 'Violin',
            'instructorName': 'Ann',
            'instructorEmail': 'Ann@X.com',
            'availableSeats': 12,
            'price': 49.5,
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body['status'] == 'pending'
    assert body['enrolledStudentCount'] == 0
    assert body['instructorEmail'] == 'ann@x.com'
    assert body['price'] == 49.5


def test_create_class_rejects_malformed_body(client) -> None:
    response = client.post('/classes', json={'name': 'Violin', 'availableSeats': -1, 'color': 'red'})

    assert response.status_code == 422


def test_admin_approval_updates_status_and_feedback(client, seed) -> None:
    (course_class,) = seed(_course_class('Guitar Basics', 'a@x.com'))

    response = client.patch(
        f'/classes/{course_class.id}',
        json={'status': 'denied', 'feedback': 'Please add a syllabus.'},
    )

    assert response.status_code == 200
    body = response.json()
    assert body['status'] == 'denied'
    assert body['feedback'] == 'Please add a syllabus.'
    assert body['name'] == 'Guitar Basics'


def test_update_unknown_class_returns_not_found(client) -> None:
    response = client.patch('/classes/999', json={'status': 'approved'})

    assert response.status_code == 404
    assert response.json() == {'detail': 'Class not found.'}


def test_update_class_rejects_unknown_status(client, seed) -> None:
    (course_class,) = seed(_course_class('Guitar Basics', 'a@x.com'))

    response = client.patch(f'/classes/{course_class.id}', json={'status': 'archived'})

    assert response.status_code == 422
