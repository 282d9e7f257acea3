"""全局 Schema"""

from .datetime_types import UTCDateTime
from .response import (
    ApiPagedResponse,
    ApiResponse,
    BaseSchema,
    ErrorResponse,
    PageParams,
)

__all__ = [
    "UTCDateTime",
    "ApiResponse",
    "ApiPagedResponse",
    "BaseSchema",
    "ErrorResponse",
    "PageParams",
]
