import logging
import sys
import uuid
from contextvars import ContextVar
from pythonjsonlogger import jsonlogger

request_id_ctx_var: ContextVar[str] = ContextVar("request_id", default="-")
request_path_ctx_var: ContextVar[str] = ContextVar("request_path", default="-")

# Passed by the routers through ``extra=``; always present in the output so log queries can filter on them.
MENU_FIELDS = ("handle", "menu_id", "section_id", "active_section_id")

JSON_FORMAT = " ".join(
    ["%(asctime)s", "%(levelname)s", "%(name)s", "%(message)s", "%(request_id)s", "%(request_path)s"]
    + [f"%({field})s" for field in MENU_FIELDS]
)
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(request_id)s %(request_path)s] %(message)s"


class RequestContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_ctx_var.get()
        record.request_path = request_path_ctx_var.get()
        for field in MENU_FIELDS:
            if not hasattr(record, field):
                setattr(record, field, None)
        return True


def configure_logging(level: str = "INFO", json_logs: bool = True) -> None:
    logger = logging.getLogger()
    logger.setLevel(level.upper())
    handler = logging.StreamHandler(sys.stdout)
    if json_logs:
        formatter = jsonlogger.JsonFormatter(JSON_FORMAT, rename_fields={"asctime": "timestamp", "levelname": "level"})
    else:
        formatter = logging.Formatter(TEXT_FORMAT)
    handler.setFormatter(formatter)
    handler.addFilter(RequestContextFilter())
    logger.handlers = [handler]


def ensure_request_id(value: str | None) -> str:
    return value or str(uuid.uuid4())
