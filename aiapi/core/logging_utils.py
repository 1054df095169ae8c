import logging
import collections

CONSOLE_LOG_FORMAT = '%(asctime)s %(levelname)-8s [%(name)s:%(module)s:%(lineno)d] - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class RecentRequestLog(logging.Handler):
    """
    Ring buffer of the package's recent log lines ("LEVEL name: message").
    run.py dumps it when a request cannot be built or sent.
    """
    def __init__(self, capacity=200):
        super().__init__()
        self.lines = collections.deque(maxlen=capacity)

    def emit(self, record):
        try:
            self.lines.append(f"{record.levelname} {record.name}: {record.getMessage()}")
        except Exception:
            self.handleError(record)

    def recent(self, limit=20):
        return list(self.lines)[-limit:]

    def clear(self):
        self.lines.clear()


recent_request_log = RecentRequestLog()


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Console output goes through a single handler on the root logger; package
    records propagate to it and are never printed twice. The recent-request
    buffer only listens on the "AiAPI" logger.

    Safe to call more than once.
    """
    numeric_log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    if not any(getattr(h, "_aiapi_console", False) for h in root_logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(CONSOLE_LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        console_handler._aiapi_console = True
        root_logger.addHandler(console_handler)

    package_logger = logging.getLogger("AiAPI")
    package_logger.setLevel(numeric_log_level)
    if recent_request_log not in package_logger.handlers:
        package_logger.addHandler(recent_request_log)

    for lib_logger_name in ["httpx", "httpcore"]:
        logging.getLogger(lib_logger_name).setLevel(logging.WARNING)

    return package_logger
