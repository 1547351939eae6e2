import httpx
import pytest

from academy.core import payment_gateway
from academy.core.payment_gateway import PaymentGatewayError, to_minor_units
from tests.conftest import auth_header, run

STUDENT = 'student@academy.com'


@pytest.mark.parametrize(
    ('price', 'expected'),
    [
        (49.99, 4999),
        (19.99, 1999),
        (100, 10000),
        (0.5, 50),
    ],
)
def test_to_minor_units(price: float, expected: int) -> None:
    assert to_minor_units(price) == expected


def test_create_payment_intent_returns_client_secret(client, monkeypatch: pytest.MonkeyPatch) -> None:
    seen = []

    async def fake_create_payment_intent(price: float) -> str:
        seen.append(price)
        return 'pi_123_secret_456'

    monkeypatch.setattr(payment_gateway, 'create_payment_intent', fake_create_payment_intent)

    response = client.post('/create-payment-intent', json={'price': 49.99}, headers=auth_header(STUDENT))

    assert response.status_code == 200
    assert response.json() == {'clientSecret': 'pi_123_secret_456'}
    assert seen == [49.99]


def test_create_payment_intent_maps_gateway_error(client, monkeypatch: pytest.MonkeyPatch) -> None:
    async def failing_create_payment_intent(price: float) -> str:
        raise PaymentGatewayError('boom')

    monkeypatch.setattr(payment_gateway, 'create_payment_intent', failing_create_payment_intent)

    response = client.post('/create-payment-intent', json={'price': 10}, headers=auth_header(STUDENT))

    assert response.status_code == 503
    assert response.json()['detail'] == 'payment gateway error'


@pytest.mark.parametrize('price', [0, -5])
def test_create_payment_intent_rejects_non_positive_price(client, price: float) -> None:
    response = client.post('/create-payment-intent', json={'price': price}, headers=auth_header(STUDENT))

    assert response.status_code == 422


def test_create_payment_intent_requires_credentials(client) -> None:
    response = client.post('/create-payment-intent', json={'price': 10})

    assert response.status_code == 401


def test_gateway_posts_amount_in_cents(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured['url'] = str(request.url)
        captured['body'] = request.content.decode()
        captured['auth'] = request.headers['Authorization']
        return httpx.Response(200, json={'id': 'pi_1', 'client_secret': 'pi_1_secret'})

    real_client = httpx.AsyncClient
    monkeypatch.setattr(
        payment_gateway.httpx,
        'AsyncClient',
        lambda **kwargs: real_client(transport=httpx.MockTransport(handler), **kwargs),
    )
    monkeypatch.setattr(payment_gateway.settings, 'STRIPE_SECRET_KEY', 'sk_test_abc')

    secret = run(payment_gateway.create_payment_intent(25.5))

    assert secret == 'pi_1_secret'
    assert captured['url'].endswith('/payment_intents')
    assert 'amount=2550' in captured['body']
    assert 'currency=usd' in captured['body']
    assert captured['auth'] == 'Bearer sk_test_abc'


def test_gateway_raises_on_provider_error(monkeypatch: pytest.MonkeyPatch) -> None:
    real_client = httpx.AsyncClient
    monkeypatch.setattr(
        payment_gateway.httpx,
        'AsyncClient',
        lambda **kwargs: real_client(
            transport=httpx.MockTransport(lambda request: httpx.Response(402, json={'error': {}})),
            **kwargs,
        ),
    )

    with pytest.raises(PaymentGatewayError):
        run(payment_gateway.create_payment_intent(25.5))


def test_record_payment_creates_enrollment_and_clears_selection(client, db) -> None:
    selection_id = client.post(
        '/selected-courses',
        json={'email': STUDENT, 'courseId': 'course-1'},
        headers=auth_header(STUDENT),
    ).json()['insertedId']

    response = client.post(
        '/payments',
        json={
            'email': STUDENT,
            'courseId': 'course-1',
            'transactionId': 'pi_1',
            'price': 49.99,
            'selectedCourseId': selection_id,
        },
        headers=auth_header(STUDENT),
    )

    body = response.json()
    assert body['insertResult']['acknowledged'] is True
    assert body['deleteResult'] == {'acknowledged': True, 'deletedCount': 1}
    assert run(db['selectedCourses'].count_documents({})) == 0
    stored = run(db['enrolledCourses'].find_one({'email': STUDENT}))
    assert stored['transactionId'] == 'pi_1'
    assert stored['date'] is not None


def test_record_payment_without_selection_keeps_selections(client, db) -> None:
    client.post('/selected-courses', json={'email': STUDENT, 'courseId': 'course-1'}, headers=auth_header(STUDENT))

    response = client.post(
        '/payments',
        json={'email': STUDENT, 'courseId': 'course-1', 'transactionId': 'pi_2', 'price': 10},
        headers=auth_header(STUDENT),
    )

    assert response.json()['deleteResult'] is None
    assert run(db['selectedCourses'].count_documents({})) == 1


def test_record_payment_with_malformed_selection_writes_nothing(client, db) -> None:
    response = client.post(
        '/payments',
        json={'email': STUDENT, 'courseId': 'course-1', 'transactionId': 'pi_3', 'price': 10, 'selectedCourseId': 'nope'},
        headers=auth_header(STUDENT),
    )

    assert response.status_code == 400
    assert run(db['enrolledCourses'].count_documents({})) == 0


def test_record_payment_for_someone_else_is_forbidden(client) -> None:
    response = client.post(
        '/payments',
        json={'email': 'other@academy.com', 'courseId': 'course-1', 'transactionId': 'pi_4', 'price': 10},
        headers=auth_header(STUDENT),
    )

    assert response.status_code == 403


def test_enrolled_courses_lists_own_enrollments(client) -> None:
    for transaction_id in ('pi_a', 'pi_b'):
        client.post(
            '/payments',
            json={'email': STUDENT, 'courseId': transaction_id, 'transactionId': transaction_id, 'price': 10},
            headers=auth_header(STUDENT),
        )

    response = client.get('/enrolled-courses', params={'email': STUDENT}, headers=auth_header(STUDENT))

    assert sorted(e['transactionId'] for e in response.json()) == ['pi_a', 'pi_b']


def test_enrolled_courses_for_other_email_is_forbidden(client) -> None:
    response = client.get(
        '/enrolled-courses',
        params={'email': 'other@academy.com'},
        headers=auth_header(STUDENT),
    )

    assert response.status_code == 403


def test_enrolled_courses_without_email_is_empty(client) -> None:
    client.post(
        '/payments',
        json={'email': STUDENT, 'courseId': 'course-1', 'transactionId': 'pi_c', 'price': 10},
        headers=auth_header(STUDENT),
    )

    response = client.get('/enrolled-courses', headers=auth_header(STUDENT))

    assert response.status_code == 200
    assert response.json() == []


def test_gateway_raises_on_non_json_body(monkeypatch: pytest.MonkeyPatch) -> None:
    real_client = httpx.AsyncClient
    monkeypatch.setattr(
        payment_gateway.httpx,
        'AsyncClient',
        lambda **kwargs: real_client(
            transport=httpx.MockTransport(lambda request: httpx.Response(200, text='<html>oops</html>')),
            **kwargs,
        ),
    )

    with pytest.raises(PaymentGatewayError):
        run(payment_gateway.create_payment_intent(25.5))


def test_payment_intent_with_non_json_gateway_body_is_service_unavailable(client, monkeypatch: pytest.MonkeyPatch) -> None:
    real_client = httpx.AsyncClient
    monkeypatch.setattr(
        payment_gateway.httpx,
        'AsyncClient',
        lambda **kwargs: real_client(
            transport=httpx.MockTransport(lambda request: httpx.Response(200, text='not json')),
            **kwargs,
        ),
    )

    response = client.post('/create-payment-intent', json={'price': 10}, headers=auth_header(STUDENT))

    assert response.status_code == 503
    assert response.json()['detail'] == 'payment gateway error'
