import sys
import traceback
from typing import Any

from uvicorn.server import logger

from util.config import config

LEVEL_RANKS = {"trace": 0, "debug": 1, "info": 2, "warn": 3, "warning": 3, "error": 4}


def _should_log(level: str) -> bool:
    if config.log_level == "local":
        return True  # everything goes out when running locally
    current_rank = LEVEL_RANKS.get(config.log_level, LEVEL_RANKS["info"])
    return LEVEL_RANKS.get(level.lower(), LEVEL_RANKS["info"]) >= current_rank


def _format_args(*args: Any) -> tuple[str, list[Exception]]:
    exceptions: list[Exception] = []
    parts: list[str] = []
    for arg in args:
        if isinstance(arg, Exception):
            exceptions.append(arg)
            parts.append(f"! {type(arg).__name__} (see below)")
        elif isinstance(arg, (dict, list)):
            parts.append(f"{type(arg).__name__}: {arg}")
        elif hasattr(arg, "__dict__"):
            parts.append(f"{type(arg).__name__}:\n```\n{repr(arg)}\n```")
        else:
            parts.append(str(arg))

    if len(parts) <= 1:
        return (parts[0] if parts else ""), exceptions

    # no exceptions means the last line closes the tree
    if not exceptions:
        return "\n ├─ ".join(parts[:-1]) + f"\n └─ {parts[-1]}", exceptions
    return "\n ├─ ".join(parts), exceptions


def _trace_of(exception: Exception) -> str | None:
    trace = exception.__traceback__
    if not trace:
        return None
    return "".join(traceback.format_tb(trace)).strip()


def _print_locally(level: str, message: str, exceptions: list[Exception]):
    if _should_log(level):
        print(f"[{level[0]}] {message}")
    for exception in exceptions:
        print(f" ‼  Message: {exception}", file = sys.stderr)
        if trace := _trace_of(exception):
            print(trace, file = sys.stderr)


def _log_to_server(level: str, message: str, exceptions: list[Exception]):
    if _should_log(level):
        match level:
            case "TRACE" | "DEBUG":
                logger.debug(message)
            case "INFO":
                logger.info(message)
            case "WARN":
                logger.warning(message)
            case "ERROR":
                logger.error(message)
    for exception in exceptions:
        logger.error(f"Message: {exception}")
        if trace := _trace_of(exception):
            logger.error(f"Details:\n └─ {trace}")


def _log_message(level: str, message: str, exceptions: list[Exception]) -> str:
    if not _should_log(level) and not exceptions:
        return message
    if config.log_level == "local":
        _print_locally(level, message, exceptions)
        return message
    try:
        _log_to_server(level, message, exceptions)
    except Exception:
        # the server logger is not always wired (e.g. in scripts)
        _print_locally(level, message, exceptions)
    return message


def t(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("TRACE", message, exceptions)


def d(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("DEBUG", message, exceptions)


def i(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("INFO", message, exceptions)


def w(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("WARN", message, exceptions)


def e(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("ERROR", message, exceptions)
