from .http_response import api_response, bad_request, outcome_response
from .request import parse_request
from .validators import to_decimal

__all__ = [
    "api_response",
    "bad_request",
    "outcome_response",
    "parse_request",
    "to_decimal",
]
