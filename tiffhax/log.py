"""Terminal colors and log file lines for the tiffhax CLI.

Library modules log through ``logging.getLogger(__name__)``; this module
only formats what the CLI prints and what it writes to ``--log`` files.
"""

import sys
from datetime import datetime

_RESET = '\033[0m'
_DIM = '\033[2m'
_CYAN = '\033[36m'
_MAGENTA = '\033[35m'
_YELLOW = '\033[33m'
_BOLD_RED = '\033[1;31m'
_BOLD_CYAN = '\033[1;36m'


def _is_tty():
    """Check if stdout is a terminal (not piped)."""
    try:
        return sys.stdout.isatty()
    except AttributeError:
        return False


# Set once at import time, --no-color overrides
_USE_COLOR = _is_tty()


def set_color_enabled(enabled: bool):
    """Override automatic color detection."""
    global _USE_COLOR
    _USE_COLOR = enabled


def color_enabled() -> bool:
    return _USE_COLOR


def _c(code: str, text: str) -> str:
    if _USE_COLOR:
        return f'{code}{text}{_RESET}'
    return text


def cli_header(text: str) -> str:
    """Bold cyan heading, e.g. a directory banner."""
    return _c(_BOLD_CYAN, text)


def cli_field(text: str) -> str:
    return _c(_CYAN, text)


def cli_offset(text: str) -> str:
    """Yellow follow-up pointer line."""
    return _c(_YELLOW, text)


def cli_data(text: str) -> str:
    """Magenta pixel-data line."""
    return _c(_MAGENTA, text)


def cli_error(text: str) -> str:
    return _c(_BOLD_RED, text)


def cli_dim(text: str) -> str:
    return _c(_DIM, text)


def _timestamp() -> str:
    return datetime.now().strftime('%Y-%m-%d %H:%M:%S')


def log_info(msg: str) -> str:
    """Format a log file INFO line."""
    return f'[{_timestamp()}] [INFO]  {msg}'


def log_warn(msg: str) -> str:
    """Format a log file WARN line."""
    return f'[{_timestamp()}] [WARN]  {msg}'


def log_error(msg: str) -> str:
    """Format a log file ERROR line."""
    return f'[{_timestamp()}] [ERROR] {msg}'
