"""Console logging for the scripts: coloured text by default, JSON lines on request."""

import logging
import json
import sys


import config

RESET = "\033[0m"

# levelno -> (ANSI colour, bracketed label)
LEVEL_STYLES = {
    logging.DEBUG: ("\033[90m", "DEBUG"),
    logging.INFO: ("\033[94m", "INFO"),
    logging.WARNING: ("\033[93m", "WARN"),
    logging.ERROR: ("\033[91m", "ERROR"),
    logging.CRITICAL: ("\033[91m\033[1m", "CRIT"),
}


class HumanFormatter(logging.Formatter):
    """One coloured line per record, e.g. `09:15:02 [INFO]  scripts.drop_table: ...`."""

    def format(self, record):
        colour, label = LEVEL_STYLES.get(record.levelno, LEVEL_STYLES[logging.INFO])
        stamp = self.formatTime(record, "%H:%M:%S")
        line = f"{stamp} {'[' + label + ']':<7} {record.name}: {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return colour + line + RESET


class JsonFormatter(logging.Formatter):
    """One JSON object per line, for log collectors."""

    def format(self, record):
        payload = {
            "severity": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "source": f"{record.module}:{record.lineno}",
            "timestamp": self.formatTime(record, self.datefmt),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        # Row values (UUIDs, datetimes, Decimals) are not JSON-native
        return json.dumps(payload, default=str)


def get_logger(name: str) -> logging.Logger:
    """Return `name`'s logger, attaching a stdout handler on first use."""
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonFormatter() if config.LOG_FORMAT == "JSON" else HumanFormatter())
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))

    return logger
