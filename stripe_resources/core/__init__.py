from .backend import (  # NOQA
    Backend,
    get_backend
)
from .form import (  # NOQA
    FormValues,
    append_to,
    format_key
)
from .iterator import (  # NOQA
    Iter,
    get_iter
)
from .params import (  # NOQA
    ListMeta,
    ListParams,
    ListResponse,
    Params,
    format_url_path
)
