import re
import sys
import traceback
from typing import Any

from uvicorn.server import logger

from util.config import config
from util.functions import mask_secret

LEVELS = {"trace": 0, "debug": 1, "info": 2, "warn": 3, "warning": 3, "error": 4}
ACCESS_TOKEN_PATTERN = re.compile(r"(access_token=)([^&\s\"']+)")


def _should_log(level: str) -> bool:
    if config.log_level == "local":
        return True  # we always log in local context
    current_level = LEVELS.get(config.log_level, 2)  # default to info
    request_level = LEVELS.get(level.lower(), 2)
    return request_level >= current_level


def _redact(message: str) -> str:
    message = ACCESS_TOKEN_PATTERN.sub(lambda match: match.group(1) + mask_secret(match.group(2)), message)
    for secret in config.all_secrets():
        value = secret.get_secret_value()
        if value:
            message = message.replace(value, mask_secret(value))
    return message


def _format_args(*args: Any) -> tuple[str, list[Exception]]:
    exceptions = []
    formatted_parts = []
    for arg in args:
        if isinstance(arg, Exception):
            exceptions.append(arg)
            formatted_parts.append(f"! {type(arg).__name__} (see below)")
        elif hasattr(arg, "__dict__"):
            formatted_parts.append(f"{type(arg).__name__}:\n```\n{repr(arg)}\n```")
        else:
            formatted_parts.append(str(arg))

    if not formatted_parts:
        return "", exceptions
    if len(formatted_parts) == 1:
        return _redact(formatted_parts[0]), exceptions
    # connect multiple parts with a tree, closing it only when no exceptions follow
    if exceptions:
        return _redact("\n ├─ ".join(formatted_parts)), exceptions
    head_lines = "\n ├─ ".join(formatted_parts[:-1])
    return _redact(f"{head_lines}\n └─ {formatted_parts[-1]}"), exceptions


def _print_local(level: str, message: str | None, exceptions: list[Exception]):
    if message is not None:
        print(f"[{level[0]}] {message}")
    for exception in exceptions:
        print(f" ‼  Message: {_redact(str(exception))}", file = sys.stderr)
        if trace := exception.__traceback__:
            print("".join(("    " + line.strip()) for line in traceback.format_tb(trace)), file = sys.stderr)


def _log_message(level: str, message: str, exceptions: list[Exception]) -> str:
    should_log = _should_log(level)
    if not should_log and not exceptions:
        return message

    if config.log_level == "local":
        _print_local(level, message if should_log else None, exceptions)
        return message

    try:
        if should_log:
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
            logger.error(f"Message: {_redact(str(exception))}")
            if trace := exception.__traceback__:
                indented_trace = "".join(traceback.format_tb(trace)).strip()
                logger.error(f"Details:\n └─ {indented_trace}")
    except Exception:
        # the uvicorn logger is not usable, fall back to printing
        _print_local(level, message if should_log else None, exceptions)
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
