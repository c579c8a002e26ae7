"""
Logging setup for the xbar-nlp command line tools.

Library modules only create `logging.getLogger(__name__)` loggers under the
`xbar_nlp` package logger. Handlers are attached to that package logger here,
and only the CLI calls `setup_logging`. Console output goes to stderr so that
JSON written to stdout stays parseable.
"""
import logging
import sys
from datetime import datetime

PACKAGE_LOGGER = 'xbar_nlp'

DEFAULT_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
DEBUG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'

CONTEXT_VALUE_LIMIT = 200


def setup_logging(log_file=None, debug=False, command=None):
    """
    Send the package's log records to stderr and, optionally, a log file.

    Args:
        log_file: File to append to; None logs to stderr only.
        debug: DEBUG level, with logger name and source location in each line.
        command: CLI command name recorded in the log file's run header.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    level = logging.DEBUG if debug else logging.INFO
    formatter = logging.Formatter(DEBUG_FORMAT if debug else DEFAULT_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    package_logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setFormatter(formatter)
        # Header goes to the file only, written before the handler is attached
        file_handler.stream.write(_run_header(command, debug))
        file_handler.flush()
        package_logger.addHandler(file_handler)

    package_logger.setLevel(level)
    return package_logger


def _run_header(command, debug):
    started = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    title = f"xbar-nlp {command}" if command else "xbar-nlp"
    mode = " (debug)" if debug else ""
    return f"{'=' * 80}\n{title} run started {started}{mode}\n{'=' * 80}\n"


def format_context(context):
    """Render `context` as `key=value` pairs, each value cut to CONTEXT_VALUE_LIMIT characters."""
    parts = []
    for key, value in context.items():
        text = str(value)
        if len(text) > CONTEXT_VALUE_LIMIT:
            text = text[:CONTEXT_VALUE_LIMIT] + "..."
        parts.append(f"{key}={text}")
    return ", ".join(parts)


def log_with_context(logger, message, context=None, level=logging.INFO):
    """
    Log `message` on `logger`; when DEBUG is enabled, append the context.

    Building the context string is skipped entirely below DEBUG, so callers
    can pass token lists or serialized trees without paying for them.
    """
    if context and logger.isEnabledFor(logging.DEBUG):
        message = f"{message} [{format_context(context)}]"
    logger.log(level, message)


def log_case_result(logger, text, error=None, duration_ms=None):
    """Log one evaluation case: INFO when it passed, WARNING with the mismatch when not."""
    timing = f" ({duration_ms:.0f}ms)" if duration_ms is not None else ""
    if error is None:
        logger.info(f"PASS \"{text}\"{timing}")
    else:
        logger.warning(f"FAIL \"{text}\"{timing}: {error}")
