from .base import (  # NOQA
    BitcoinReceiver,
    BitcoinReceiverList,
    BitcoinReceiverListParams,
    BitcoinReceiverParams,
    BitcoinReceiverUpdateParams,
    BitcoinTransaction,
    BitcoinTransactionList,
    Client,
    get_client
)
