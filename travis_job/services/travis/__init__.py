# Travis services - Travis CI API integration
from .client import TravisClient
from .schemas import BuildRecord
from .states import DONE_STATES, FAILURE_STATES, SUCCESS_STATES, is_done, is_success

__all__ = [
    "TravisClient",
    "BuildRecord",
    "DONE_STATES",
    "FAILURE_STATES",
    "SUCCESS_STATES",
    "is_done",
    "is_success",
]
