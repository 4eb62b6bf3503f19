"""Form encoding of request parameters.

Nested values are flattened into bracketed keys the way the API expects:

    metadata={'order': '6735'}  ->  metadata[order]=6735
    expand=['customer']         ->  expand[0]=customer
"""
from dataclasses import (
    fields,
    is_dataclass
)
from enum import Enum
from typing import (
    Any,
    List,
    Optional,
    Sequence,
    Tuple
)
from urllib.parse import urlencode


class FormValues:

    """Ordered, multi-valued collection of form keys.
    """

    def __init__(self, values: Sequence[Tuple[str, str]] = ()):
        self._values: List[Tuple[str, str]] = list(values)

    def add(self, key: str, value: str):
        self._values.append((key, value))

    def set(self, key: str, value: str):
        """Replace every value stored under `key` with a single one.
        """
        self._values = [(k, v) for k, v in self._values if k != key]
        self._values.append((key, value))

    def get(self, key: str) -> List[str]:
        return [v for k, v in self._values if k == key]

    def empty(self) -> bool:
        return not self._values

    def encode(self) -> str:
        return urlencode(self._values)

    def to_values(self) -> List[Tuple[str, str]]:
        return list(self._values)

    def __len__(self):
        return len(self._values)

    def __repr__(self):
        return f'FormValues({self._values!r})'


def format_key(parts: Sequence[str]) -> str:
    head, *tail = parts
    return head + ''.join(f'[{part}]' for part in tail)


def append_to(values: FormValues, params: Any, key_parts: Optional[List[str]] = None):
    """Flatten a params dataclass into `values`.

    Fields set to None are skipped, so are fields declared with
    `metadata={'form': '-'}`. A field may be renamed with
    `metadata={'form': '<name>'}`.
    """
    key_parts = list(key_parts or [])

    for f in fields(params):
        name = f.metadata.get('form', f.name)
        if name == '-':
            continue
        _append_value(values, key_parts + [name], getattr(params, f.name))

    extra = getattr(params, 'extra', None)
    if extra:
        for key, value in extra.items():
            _append_value(values, key_parts + [key], value)


def _append_value(values: FormValues, parts: List[str], value: Any):
    if value is None:
        return

    if is_dataclass(value):
        append_to(values, value, parts)
    elif isinstance(value, bool):
        values.add(format_key(parts), 'true' if value else 'false')
    elif isinstance(value, Enum):
        _append_value(values, parts, value.value)
    elif isinstance(value, dict):
        for key, item in value.items():
            _append_value(values, parts + [str(key)], item)
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _append_value(values, parts + [str(index)], item)
    else:
        values.add(format_key(parts), str(value))
