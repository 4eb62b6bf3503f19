from .base import (  # NOQA
    Card,
    CardList,
    CardListParams,
    CardParams,
    Client,
    card_path,
    get_client,
    resolve_owner
)
