from dataclasses import (
    dataclass,
    field
)
from typing import (
    Dict,
    List,
    Optional
)
from urllib.parse import quote

from dataclasses_json import dataclass_json


def format_url_path(template: str, *ids) -> str:
    """Substitute identifiers into an API path template.

    Every identifier is percent-encoded so that it always occupies exactly
    one path segment:

        >>> format_url_path('/customers/%s/sources/%s', 'cus_1', 'card/2')
        '/customers/cus_1/sources/card%2F2'
    """
    return template % tuple(quote(str(i), safe='') for i in ids)


@dataclass
class Params:

    """Parameters common to every request.

    `idempotency_key` and `stripe_account` travel as request headers and are
    never form encoded. `extra` holds raw form keys that have no field of
    their own.
    """

    expand: Optional[List[str]] = None
    metadata: Optional[Dict[str, str]] = None
    extra: Optional[Dict[str, str]] = field(default=None, metadata={'form': '-'})
    idempotency_key: Optional[str] = field(default=None, metadata={'form': '-'})
    stripe_account: Optional[str] = field(default=None, metadata={'form': '-'})

    def add_expand(self, path: str):
        if self.expand is None:
            self.expand = []
        self.expand.append(path)

    def add_metadata(self, key: str, value: str):
        if self.metadata is None:
            self.metadata = {}
        self.metadata[key] = value

    def add_extra(self, key: str, value: str):
        if self.extra is None:
            self.extra = {}
        self.extra[key] = value


@dataclass
class ListParams(Params):

    """Parameters common to every list request.

    Set `single` to stop the iterator after the first page.
    """

    ending_before: Optional[str] = None
    starting_after: Optional[str] = None
    limit: Optional[int] = None
    single: bool = field(default=False, metadata={'form': '-'})


@dataclass_json
@dataclass
class ListMeta:
    has_more: bool = False
    total_count: Optional[int] = None
    url: Optional[str] = None


@dataclass_json
@dataclass
class ListResponse(ListMeta):

    """Single page of a list response.

    Subclasses add a typed `data` field.
    """

    def get_list_meta(self) -> ListMeta:
        return ListMeta(
            has_more=self.has_more,
            total_count=self.total_count,
            url=self.url
        )
