"""Stripe HTTP backend.

The only place where requests leave the process. Resource clients build a
path and a params object and hand both over to `Backend.call` or
`Backend.call_raw`.
"""
import logging
from typing import (
    Optional,
    Type,
    TypeVar
)

import requests

from stripe_resources import settings
from stripe_resources.exceptions import (
    APIError,
    AuthenticationError,
    CardError,
    IdempotencyError,
    InvalidRequestError,
    PermissionDeniedError,
    RateLimitError
)

from .form import (
    FormValues,
    append_to
)
from .params import Params

logger = logging.getLogger(__name__)

T = TypeVar('T')

# form fields masked in debug logs, matched on the innermost key part
MASKED_FIELDS = ('number', 'cvc')
MASK = '********'


def mask_form_pairs(pairs):
    """Replace card numbers and CVCs in `pairs` with a mask.

        >>> mask_form_pairs([('source[number]', '4242424242424242'), ('limit', '3')])
        [('source[number]', '********'), ('limit', '3')]
    """
    return [
        (key, MASK if key.rsplit('[', 1)[-1].rstrip(']') in MASKED_FIELDS else value)
        for key, value in pairs
    ]


class Backend:

    """Stripe rest api backend.

    Safe to share between clients; the underlying `requests.Session` is
    created once per backend.
    """

    error_status_map = {
        401: AuthenticationError,
        403: PermissionDeniedError,
        429: RateLimitError,
    }

    error_type_map = {
        'api_error': APIError,
        'card_error': CardError,
        'idempotency_error': IdempotencyError,
        'invalid_request_error': InvalidRequestError,
    }

    def __init__(self,
                 api_url: str,
                 api_version: Optional[str] = None,
                 timeout: int = 80,
                 user_agent: Optional[str] = None,
                 session: Optional[requests.Session] = None):
        self.api_url = api_url.rstrip('/')
        self.api_version = api_version
        self.timeout = timeout
        self.user_agent = user_agent
        self._session = session or requests.Session()

    def call(self, method: str, path: str, key: str, params: Optional[Params], cls: Type[T]) -> T:
        """Form encode `params` and perform the request.

        :raise AuthenticationError: if no api key given
        :raise StripeError: if api responded with an error
        :raise HTTPError: if api responded with an error without json body
        """
        form_values = FormValues()
        if params is not None:
            append_to(form_values, params)
        return self.call_raw(method, path, key, form_values, params, cls)

    def call_raw(self,
                 method: str,
                 path: str,
                 key: str,
                 form_values: Optional[FormValues],
                 params: Optional[Params],
                 cls: Type[T]) -> T:
        """Perform the request with already encoded form values.

        `params` is only consulted for the request headers.
        """
        data = self._request(method, path, key, form_values, params)
        return cls.from_dict(data)

    def _request(self, method, path, key, form_values, params):
        if not key:
            raise AuthenticationError('No API key provided')

        url = f'{self.api_url}{path}'
        pairs = form_values.to_values() if form_values is not None else []

        request_kwargs = {}
        if method == 'POST':
            request_kwargs['data'] = pairs
        else:
            request_kwargs['params'] = pairs

        resp = self._session.request(
            method,
            url,
            headers=self._build_headers(key, method, params),
            timeout=self.timeout,
            **request_kwargs
        )
        logger.debug("Stripe %s %s request: `%s` response %i: `%s`",
                     method, url, mask_form_pairs(pairs), resp.status_code, resp.content)

        self._handle_error_codes(resp)

        return resp.json()

    def _build_headers(self, key, method, params):
        headers = {
            'Authorization': f'Bearer {key}',
        }
        if self.api_version:
            headers['Stripe-Version'] = self.api_version
        if self.user_agent:
            headers['User-Agent'] = self.user_agent
        if method == 'POST':
            headers['Content-Type'] = 'application/x-www-form-urlencoded'
        if params is not None:
            if params.idempotency_key:
                headers['Idempotency-Key'] = params.idempotency_key
            if params.stripe_account:
                headers['Stripe-Account'] = params.stripe_account
        return headers

    def _handle_error_codes(self, resp):
        if resp.status_code < 400:
            return

        try:
            data = resp.json()
        except ValueError:
            logger.error("Error while parsing json response from stripe: %s",
                         resp.content)
            data = None

        error = data.get('error') if isinstance(data, dict) else None
        if not isinstance(error, dict):
            resp.raise_for_status()

        exc_cls = (
            self.error_status_map.get(resp.status_code)
            or self.error_type_map.get(error.get('type'))
            or APIError
        )
        exc = exc_cls(
            message=error.get('message'),
            http_status=resp.status_code,
            code=error.get('code'),
            param=error.get('param'),
            type=error.get('type'),
            request_id=resp.headers.get('Request-Id'),
            json_body=data,
        )
        logger.error("Stripe error %i %s: %s", resp.status_code, exc_cls.__name__, exc)
        raise exc


def get_backend() -> Backend:
    return Backend(
        api_url=settings.API_URL,
        api_version=settings.API_VERSION,
        timeout=settings.REQUEST_TIMEOUT,
        user_agent=settings.USER_AGENT,
    )
