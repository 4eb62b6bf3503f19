class StripeException(Exception):
    pass


class InvalidParams(StripeException, ValueError):
    pass


class StripeError(StripeException):

    """Error returned by the API.

    Raised by the backend for every non-successful response that carries a
    JSON error body. Resource clients never catch it.
    """

    def __init__(self,
                 message=None,
                 http_status=None,
                 code=None,
                 param=None,
                 type=None,
                 request_id=None,
                 json_body=None):
        super().__init__(message)
        self.message = message
        self.http_status = http_status
        self.code = code
        self.param = param
        self.type = type
        self.request_id = request_id
        self.json_body = json_body

    def __str__(self):
        msg = self.message or '<empty message>'
        if self.request_id:
            return f'Request {self.request_id}: {msg}'
        return msg


class APIError(StripeError):
    pass


class CardError(StripeError):
    pass


class IdempotencyError(StripeError):
    pass


class InvalidRequestError(StripeError):
    pass


class AuthenticationError(StripeError):
    pass


class PermissionDeniedError(StripeError):
    pass


class RateLimitError(StripeError):
    pass
