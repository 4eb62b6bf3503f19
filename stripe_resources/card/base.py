"""Cards client.

A card always belongs to an owner, which one is decided by the params:

    account    /accounts/{account}/external_accounts
    customer   /customers/{customer}/sources
    recipient  /recipients/{recipient}/cards
"""
import logging
from dataclasses import (
    dataclass,
    field
)
from typing import (
    Dict,
    List,
    Optional,
    Tuple
)

from dataclasses_json import dataclass_json

from stripe_resources import settings
from stripe_resources.core import (
    Backend,
    FormValues,
    Iter,
    ListParams,
    ListResponse,
    Params,
    append_to,
    format_key,
    format_url_path,
    get_backend,
    get_iter
)
from stripe_resources.exceptions import InvalidParams

logger = logging.getLogger(__name__)

OWNER_PATHS = (
    ('account', '/accounts/%s/external_accounts'),
    ('customer', '/customers/%s/sources'),
    ('recipient', '/recipients/%s/cards'),
)

# owners whose collections also hold other kinds of sources
FILTERED_OWNERS = ('account', 'customer')

# sent nested under source[...] when a card is created from raw details
CARD_SOURCE_FIELDS = (
    'number',
    'cvc',
    'currency',
    'exp_month',
    'exp_year',
    'name',
    'address_city',
    'address_country',
    'address_line1',
    'address_line2',
    'address_state',
    'address_zip',
)


@dataclass_json
@dataclass
class Card:

    id: str
    object: str = 'card'
    account: Optional[str] = None
    address_city: Optional[str] = None
    address_country: Optional[str] = None
    address_line1: Optional[str] = None
    address_line1_check: Optional[str] = None
    address_line2: Optional[str] = None
    address_state: Optional[str] = None
    address_zip: Optional[str] = None
    address_zip_check: Optional[str] = None
    brand: Optional[str] = None
    country: Optional[str] = None
    currency: Optional[str] = None
    customer: Optional[str] = None
    cvc_check: Optional[str] = None
    default_for_currency: bool = False
    deleted: bool = False
    dynamic_last4: Optional[str] = None
    exp_month: Optional[int] = None
    exp_year: Optional[int] = None
    fingerprint: Optional[str] = None
    funding: Optional[str] = None
    last4: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None
    name: Optional[str] = None
    recipient: Optional[str] = None
    tokenization_method: Optional[str] = None


@dataclass_json
@dataclass
class CardList(ListResponse):
    data: List[Card] = field(default_factory=list)


@dataclass
class CardParams(Params):

    """Card params.

    Exactly one of `account`, `customer` or `recipient` selects the owner,
    none of them is form encoded.
    """

    account: Optional[str] = field(default=None, metadata={'form': '-'})
    customer: Optional[str] = field(default=None, metadata={'form': '-'})
    recipient: Optional[str] = field(default=None, metadata={'form': '-'})
    token: Optional[str] = field(default=None, metadata={'form': '-'})

    address_city: Optional[str] = None
    address_country: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    address_state: Optional[str] = None
    address_zip: Optional[str] = None
    currency: Optional[str] = None
    cvc: Optional[str] = None
    default_for_currency: Optional[bool] = None
    exp_month: Optional[str] = None
    exp_year: Optional[str] = None
    name: Optional[str] = None
    number: Optional[str] = None

    def append_to_as_card_source_or_external_account(self,
                                                     body: FormValues,
                                                     key_parts: Optional[List[str]] = None):
        """Encode params for card creation.

        Generic encoding would send card details top level, where the API
        rejects them. Only common params and `default_for_currency` stay top
        level, the token becomes `external_account` for accounts and `source`
        otherwise, raw details go under `source[...]`.
        """
        key_parts = list(key_parts or [])

        append_to(body, Params(expand=self.expand, metadata=self.metadata, extra=self.extra), key_parts)

        if self.default_for_currency is not None:
            body.add(format_key(key_parts + ['default_for_currency']),
                     'true' if self.default_for_currency else 'false')

        if self.token is not None:
            token_key = 'external_account' if self.account is not None else 'source'
            body.add(format_key(key_parts + [token_key]), self.token)

        if self.number is not None:
            body.add(format_key(key_parts + ['source', 'object']), 'card')

        for name in CARD_SOURCE_FIELDS:
            value = getattr(self, name)
            if value is not None:
                body.add(format_key(key_parts + ['source', name]), str(value))


@dataclass
class CardListParams(ListParams):
    account: Optional[str] = field(default=None, metadata={'form': '-'})
    customer: Optional[str] = field(default=None, metadata={'form': '-'})
    recipient: Optional[str] = field(default=None, metadata={'form': '-'})


def resolve_owner(params) -> Tuple[str, str]:
    """Return `(owner_field, collection_path)` for card params.

    :raise InvalidParams: if params missing, or not exactly one owner set
    """
    if params is None:
        raise InvalidParams('params should not be None')

    owners = [
        (name, template) for name, template in OWNER_PATHS
        if getattr(params, name) is not None
    ]
    if not owners:
        raise InvalidParams('Invalid card params: either account, customer or recipient need to be set')
    if len(owners) > 1:
        raise InvalidParams('Invalid card params: only one of account, customer or recipient can be set')

    name, template = owners[0]
    return name, format_url_path(template, getattr(params, name))


def card_path(params, card_id: Optional[str] = None) -> str:
    _, path = resolve_owner(params)
    if card_id is None:
        return path
    return path + format_url_path('/%s', card_id)


class Client:

    """Client for card APIs.

    Every operation validates the owner before any request is made, except
    `list` which defers the error until the iterator is first advanced.
    """

    def __init__(self, backend: Backend, key: str):
        self.backend = backend
        self.key = key

    def new(self, params: CardParams) -> Card:
        """Create card for an account, customer or recipient.

        https://stripe.com/docs/api#create_card
        """
        path = card_path(params)

        body = FormValues()
        params.append_to_as_card_source_or_external_account(body)

        logger.debug("Create card at %s", path)
        return self.backend.call_raw('POST', path, self.key, body, params, Card)

    def get(self, card_id: str, params: CardParams) -> Card:
        """https://stripe.com/docs/api#retrieve_card
        """
        path = card_path(params, card_id)
        return self.backend.call('GET', path, self.key, params, Card)

    def update(self, card_id: str, params: CardParams) -> Card:
        """https://stripe.com/docs/api#update_card
        """
        path = card_path(params, card_id)
        return self.backend.call('POST', path, self.key, params, Card)

    def delete(self, card_id: str, params: CardParams) -> Card:
        """Delete card, returned card has `deleted` set.

        https://stripe.com/docs/api#delete_card
        """
        path = card_path(params, card_id)
        return self.backend.call('DELETE', path, self.key, params, Card)

    def list(self, params: CardListParams) -> Iter[Card]:
        """Iterate over owner's cards.

        Invalid params are reported by the first `next()`, not here.

        https://stripe.com/docs/api#list_cards
        """
        path = None
        error_message = None
        try:
            owner, path = resolve_owner(params)
            if owner in FILTERED_OWNERS:
                path += '?object=card'
        except InvalidParams as exc:
            error_message = str(exc)

        def query(p: Params, form_values: FormValues):
            if error_message is not None:
                raise InvalidParams(error_message)
            page = self.backend.call_raw('GET', path, self.key, form_values, p, CardList)
            return page.data, page.get_list_meta()

        return get_iter(params, query)


def get_client() -> Client:
    return Client(get_backend(), settings.API_KEY)
