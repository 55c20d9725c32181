import logging
from logging import Formatter, LogRecord

RESET = "\033[0m"


class ColorLogFormatter(Formatter):
    """Formatter prefixing log lines with an ANSI style per level"""

    level_styles: dict[int, str] = {
        logging.CRITICAL: "\033[1m\033[31m",
        logging.ERROR: "\033[31m",
        logging.WARNING: "\033[33m",
        logging.DEBUG: "\033[2m",
    }

    def format(self, record: LogRecord) -> str:
        line = super().format(record)
        style = self.level_styles.get(record.levelno)
        if style is None:
            return line
        return f"{style}{line}{RESET}"
