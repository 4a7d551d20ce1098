import datetime
import sys
from collections.abc import Callable
from typing import ClassVar


def _stderrPrint(message: str) -> None:
    print(message, file=sys.stderr, flush=True)


class Logger:
    # stdout belongs to the table
    _logFunc: ClassVar[Callable[[str], None]] = _stderrPrint

    @classmethod
    def setLogFunction(cls, logFunc: Callable[[str], None]) -> None:
        cls._logFunc = logFunc

    @classmethod
    def resetLogFunction(cls) -> None:
        cls._logFunc = _stderrPrint

    @staticmethod
    def _emit(level: str, message: object) -> None:
        timeNow: str = datetime.datetime.now().strftime("%d.%m.%Y %H:%M:%S")
        Logger._logFunc(f"[{timeNow}] [{level}] {message}")

    @staticmethod
    def log(message: object) -> None:
        Logger._emit("LOG", message)

    @staticmethod
    def error(message: object) -> None:
        Logger._emit("ERROR", message)

    @staticmethod
    def success(message: object) -> None:
        Logger._emit("SUCCESS", message)

    @staticmethod
    def warning(message: object) -> None:
        Logger._emit("WARNING", message)
