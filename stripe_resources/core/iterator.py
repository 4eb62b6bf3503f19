import copy
from collections import deque
from typing import (
    Callable,
    Deque,
    Generic,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar
)

from .form import (
    FormValues,
    append_to
)
from .params import (
    ListMeta,
    ListParams,
    Params
)

T = TypeVar('T')

Query = Callable[[Params, FormValues], Tuple[List[T], ListMeta]]


class Iter(Generic[T]):

    """Lazy iterator over every page of a list endpoint.

    Nothing is fetched until the first advance. Errors raised by the page
    query propagate from `next()` (or from the `for` loop).

        it = client.list(params)
        while it.next():
            receiver = it.current()
    """

    def __init__(self, list_params: ListParams, form_values: FormValues, query: Query):
        self._list_params = list_params
        self._form_values = form_values
        self._query = query
        self._values: Deque[T] = deque()
        self._cur: Optional[T] = None
        self._meta: Optional[ListMeta] = None
        self._exhausted = False

    def next(self) -> bool:
        if self._exhausted:
            return False
        if self._meta is None:
            self._get_page()
        elif not self._values and self._can_fetch_more():
            item_id = self._cur.id
            # moving backwards when ending_before was given
            if self._list_params.ending_before is not None:
                self._list_params.ending_before = item_id
                self._form_values.set('ending_before', item_id)
            else:
                self._list_params.starting_after = item_id
                self._form_values.set('starting_after', item_id)
            self._get_page()

        if not self._values:
            # an empty page ends the list even if has_more is set
            self._exhausted = True
            return False

        self._cur = self._values.popleft()
        return True

    def current(self) -> Optional[T]:
        return self._cur

    def meta(self) -> Optional[ListMeta]:
        return self._meta

    def _can_fetch_more(self) -> bool:
        return (
            self._meta.has_more
            and not self._list_params.single
            and self._cur is not None
        )

    def _get_page(self):
        values, meta = self._query(self._list_params, self._form_values)
        values = list(values)
        if self._list_params.ending_before is not None:
            # pages always arrive in forward order
            values.reverse()
        self._values = deque(values)
        self._meta = meta

    def __iter__(self) -> Iterator[T]:
        while self.next():
            yield self._cur


def get_iter(list_params: Optional[ListParams], query: Query) -> Iter:
    """Build an iterator for `query`.

    Never raises: `list_params` is encoded here but `query` is first invoked
    by the iterator's first advance.
    """
    form_values = FormValues()
    if list_params is not None:
        list_params = copy.copy(list_params)
        append_to(form_values, list_params)
    else:
        list_params = ListParams()
    return Iter(list_params, form_values, query)
