import pytest

from stripe_resources.core import (
    ListMeta,
    Params,
    format_url_path
)
from stripe_resources.core.params import ListResponse


@pytest.mark.parametrize(
    'template, ids, expected',
    (
        ('/bitcoin/receivers/%s', ('btcrcv_123',), '/bitcoin/receivers/btcrcv_123'),
        ('/customers/%s/sources/%s', ('cus_123', 'card_abc'), '/customers/cus_123/sources/card_abc'),
        ('/customers/%s/sources', ('cus 1/2',), '/customers/cus%201%2F2/sources'),
        ('/recipients/%s/cards', ('rp_?#&',), '/recipients/rp_%3F%23%26/cards'),
    )
)
def test_format_url_path(template, ids, expected):
    assert format_url_path(template, *ids) == expected


def test_params_helpers():
    params = Params()
    params.add_expand('customer')
    params.add_metadata('order', '6735')
    params.add_extra('description', 'test')

    assert params.expand == ['customer']
    assert params.metadata == {'order': '6735'}
    assert params.extra == {'description': 'test'}


def test_list_response_meta():
    page = ListResponse.from_dict({
        'object': 'list',
        'has_more': True,
        'total_count': 3,
        'url': '/v1/bitcoin/receivers',
    })
    assert page.get_list_meta() == ListMeta(has_more=True, total_count=3, url='/v1/bitcoin/receivers')
