# warehouse_api/core/logging/
# ├─ builder.py      make_dict_config(settings), setup_logging(settings), queue mode
# ├─ formatters.py   JsonFormatter, ColorFormatter
# ├─ filters.py      RequestIdFilter, RedactFilter (+ contextvar helpers)
# ├─ handlers.py     handler factories, DatabaseLogHandler
# └─ middleware.py   RequestIDMiddleware

from .builder import setup_logging, make_dict_config, stop_queue_logging, get_queue_stats
from .filters import set_request_id, get_request_id, RequestIdFilter
from .middleware import RequestIDMiddleware

__all__ = [
    "setup_logging",
    "make_dict_config",
    "stop_queue_logging",
    "get_queue_stats",
    "set_request_id",
    "get_request_id",
    "RequestIdFilter",
    "RequestIDMiddleware",
]
