import pytest

from stripe_resources import (
    bitcoin_receiver,
    card
)
from stripe_resources.core import Backend

API_URL = 'https://api.stripe.test/v1'
API_KEY = 'sk_test_123'


@pytest.fixture
def backend():
    return Backend(API_URL, api_version='2018-02-28', user_agent='stripe-resources/test')


@pytest.fixture
def backend_mock(mocker):
    return mocker.Mock(spec=Backend)


@pytest.fixture
def card_client(backend):
    return card.Client(backend, API_KEY)


@pytest.fixture
def bitcoin_receiver_client(backend):
    return bitcoin_receiver.Client(backend, API_KEY)


@pytest.fixture
def card_data_factory():
    def _card_data_factory(**kwargs):
        data = {
            'id': 'card_abc',
            'object': 'card',
            'brand': 'Visa',
            'country': 'US',
            'customer': 'cus_123',
            'exp_month': 12,
            'exp_year': 2030,
            'funding': 'credit',
            'last4': '4242',
            'metadata': {},
        }
        data.update(kwargs)
        return data
    return _card_data_factory


@pytest.fixture
def receiver_data_factory():
    def _receiver_data_factory(**kwargs):
        data = {
            'id': 'btcrcv_123',
            'object': 'bitcoin_receiver',
            'active': False,
            'amount': 1000,
            'amount_received': 0,
            'bitcoin_amount': 1757908,
            'bitcoin_amount_received': 0,
            'bitcoin_uri': 'bitcoin:test_7i9Fo4ygzmcIzhoTnZtGpNb1?amount=0.01757908',
            'created': 1524046325,
            'currency': 'usd',
            'description': 'Receiver for John Doe',
            'email': 'test@example.com',
            'filled': False,
            'inbound_address': 'test_7i9Fo4ygzmcIzhoTnZtGpNb1',
            'livemode': False,
            'metadata': {},
            'transactions': {
                'object': 'list',
                'data': [],
                'has_more': False,
                'total_count': 0,
                'url': '/v1/bitcoin/receivers/btcrcv_123/transactions',
            },
        }
        data.update(kwargs)
        return data
    return _receiver_data_factory


@pytest.fixture
def list_data_factory():
    def _list_data_factory(items, url, has_more=False):
        return {
            'object': 'list',
            'data': items,
            'has_more': has_more,
            'url': url,
        }
    return _list_data_factory
