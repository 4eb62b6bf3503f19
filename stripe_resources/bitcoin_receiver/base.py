"""Bitcoin receivers client.

Bitcoin receivers are deprecated by the API in favour of sources, the
endpoints keep working for accounts that already use them.
"""
import logging
from dataclasses import (
    dataclass,
    field
)
from typing import (
    Dict,
    List,
    Optional
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
    format_url_path,
    get_backend,
    get_iter
)

logger = logging.getLogger(__name__)


@dataclass_json
@dataclass
class BitcoinTransaction:

    id: str
    amount: Optional[int] = None
    bitcoin_amount: Optional[int] = None
    created: Optional[int] = None
    currency: Optional[str] = None
    customer: Optional[str] = None
    receiver: Optional[str] = None


@dataclass_json
@dataclass
class BitcoinTransactionList(ListResponse):
    data: List[BitcoinTransaction] = field(default_factory=list)


@dataclass_json
@dataclass
class BitcoinReceiver:

    id: str
    active: bool = False
    amount: Optional[int] = None
    amount_received: Optional[int] = None
    bitcoin_amount: Optional[int] = None
    bitcoin_amount_received: Optional[int] = None
    bitcoin_uri: Optional[str] = None
    created: Optional[int] = None
    currency: Optional[str] = None
    customer: Optional[str] = None
    description: Optional[str] = None
    email: Optional[str] = None
    filled: bool = False
    inbound_address: Optional[str] = None
    livemode: bool = False
    metadata: Optional[Dict[str, str]] = None
    payment: Optional[str] = None
    refund_address: Optional[str] = None
    reject_transactions: bool = False
    transactions: Optional[BitcoinTransactionList] = None


@dataclass_json
@dataclass
class BitcoinReceiverList(ListResponse):
    data: List[BitcoinReceiver] = field(default_factory=list)


@dataclass
class BitcoinReceiverParams(Params):
    amount: Optional[int] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    email: Optional[str] = None
    refund_mispayments: Optional[bool] = None


@dataclass
class BitcoinReceiverUpdateParams(Params):
    description: Optional[str] = None
    email: Optional[str] = None
    refund_address: Optional[str] = None


@dataclass
class BitcoinReceiverListParams(ListParams):
    active: Optional[bool] = None
    filled: Optional[bool] = None
    uncaptured_funds: Optional[bool] = None


class Client:

    """Client for /bitcoin/receivers APIs.

    https://stripe.com/docs/api#bitcoin_receivers
    """

    def __init__(self, backend: Backend, key: str):
        self.backend = backend
        self.key = key

    def new(self, params: BitcoinReceiverParams) -> BitcoinReceiver:
        """Create bitcoin receiver.

        https://stripe.com/docs/api#create_bitcoin_receiver
        """
        logger.debug("Create bitcoin receiver")
        return self.backend.call('POST', '/bitcoin/receivers', self.key, params, BitcoinReceiver)

    def get(self, receiver_id: str, params: BitcoinReceiverParams = None) -> BitcoinReceiver:
        """https://stripe.com/docs/api#retrieve_bitcoin_receiver
        """
        path = format_url_path('/bitcoin/receivers/%s', receiver_id)
        return self.backend.call('GET', path, self.key, params, BitcoinReceiver)

    def update(self, receiver_id: str, params: BitcoinReceiverUpdateParams) -> BitcoinReceiver:
        """https://stripe.com/docs/api#update_bitcoin_receiver
        """
        path = format_url_path('/bitcoin/receivers/%s', receiver_id)
        return self.backend.call('POST', path, self.key, params, BitcoinReceiver)

    def list(self, params: BitcoinReceiverListParams = None) -> Iter[BitcoinReceiver]:
        """Iterate over bitcoin receivers.

        https://stripe.com/docs/api#list_bitcoin_receivers
        """
        def query(p: Params, form_values: FormValues):
            page = self.backend.call_raw('GET', '/bitcoin/receivers', self.key, form_values, p,
                                         BitcoinReceiverList)
            return page.data, page.get_list_meta()

        return get_iter(params, query)


def get_client() -> Client:
    return Client(get_backend(), settings.API_KEY)
