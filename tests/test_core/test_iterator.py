from dataclasses import dataclass

import pytest

from stripe_resources.core import (
    ListMeta,
    ListParams,
    get_iter
)


@dataclass
class Item:
    id: str


class PagedQuery:

    """Serves prepared pages and records the cursor of every request.
    """

    def __init__(self, *pages):
        self.pages = list(pages)
        self.cursors = []

    def __call__(self, params, form_values):
        self.cursors.append((
            form_values.get('starting_after'),
            form_values.get('ending_before'),
        ))
        ids, has_more = self.pages.pop(0)
        return [Item(i) for i in ids], ListMeta(has_more=has_more)


def collect(it):
    return [item.id for item in it]


def test_nothing_fetched_before_first_advance():
    query = PagedQuery((['a'], False))
    get_iter(None, query)
    assert query.cursors == []


def test_forward_pagination():
    query = PagedQuery((['a', 'b'], True), (['c'], False))
    it = get_iter(ListParams(limit=2), query)

    assert collect(it) == ['a', 'b', 'c']
    assert query.cursors == [([], []), (['b'], [])]
    assert it.meta().has_more is False


def test_backward_pagination():
    query = PagedQuery((['a', 'b'], True), (['y', 'z'], False))
    it = get_iter(ListParams(ending_before='x'), query)

    assert collect(it) == ['b', 'a', 'z', 'y']
    assert query.cursors == [([], ['x']), ([], ['a'])]


def test_single_page():
    query = PagedQuery((['a', 'b'], True), (['c'], False))
    it = get_iter(ListParams(single=True), query)

    assert collect(it) == ['a', 'b']
    assert len(query.cursors) == 1


def test_next_and_current():
    it = get_iter(None, PagedQuery((['a'], False)))

    assert it.current() is None
    assert it.next() is True
    assert it.current() == Item('a')
    assert it.next() is False


def test_empty_page_with_has_more_stops():
    query = PagedQuery(([], True))
    it = get_iter(None, query)

    assert it.next() is False
    assert it.next() is False
    assert len(query.cursors) == 1


def test_caller_params_untouched():
    params = ListParams(limit=1)
    it = get_iter(params, PagedQuery((['a'], True), (['b'], False)))

    assert collect(it) == ['a', 'b']
    assert params.starting_after is None


def test_query_error_raised_on_advance():
    def query(params, form_values):
        raise RuntimeError('boom')

    it = get_iter(None, query)
    with pytest.raises(RuntimeError):
        it.next()


def test_empty_page_after_cursor_ends_iteration():
    query = PagedQuery((['a'], True), ([], True))
    it = get_iter(None, query)

    assert collect(it) == ['a']
    assert it.next() is False
    assert it.next() is False
    assert query.cursors == [([], []), (['a'], [])]
