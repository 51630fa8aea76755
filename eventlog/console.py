"""Console mirror: every formatted line also goes to the diagnostic log."""

import logging
from typing import Protocol, runtime_checkable


@runtime_checkable
class ConsoleSink(Protocol):
    def emit(self, tag: str, line: str) -> None: ...

    def warn(self, tag: str, message: str, exc: BaseException | None = None) -> None: ...


class LoggingConsoleSink:
    """Writes through the stdlib logger named after the tag."""

    def emit(self, tag: str, line: str) -> None:
        logging.getLogger(tag).info(line)

    def warn(self, tag: str, message: str, exc: BaseException | None = None) -> None:
        if exc is None:
            logging.getLogger(tag).warning(message)
        else:
            logging.getLogger(tag).warning("%s: %s", message, exc)
