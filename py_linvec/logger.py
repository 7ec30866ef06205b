"""The `py_linvec` logger.

Only two places write to it: `basicConfig`, which reports the config file it
found and any unknown `[pylinvec]` keys, and `Settings.set_eps`, which warns
each time the global tolerance changes. Vector construction, arithmetic and
comparison never log. Errors are raised to the caller.

Messages go to stderr at INFO. To record which config file was loaded, lower
the level and attach a file handler:

```python
import logging

import py_linvec
from py_linvec.logger import logger, enable_file_logging, disable_file_logging

logger.setLevel(logging.DEBUG)
enable_file_logging("linvec_config.log")
py_linvec.basicConfig("pylinvec.toml")
disable_file_logging()
```
"""
import logging
from typing import Optional

__all__ = ('logger',
           'enable_file_logging',
           'disable_file_logging',
)

formatter = logging.Formatter("%(levelname)s:%(name)s:%(message)s")
console_handler = logging.StreamHandler()
console_handler.setFormatter(formatter)
console_handler.setLevel(logging.DEBUG)  # Lowest level for console

logger: logging.Logger = logging.getLogger('py_linvec')
logger.addHandler(console_handler)
logger.setLevel(logging.INFO)

# File handler (optional, added dynamically)
file_handler: Optional[logging.FileHandler] = None


def enable_file_logging(filename: str = "debug.log") -> None:
    """Enable logging to a file with DEBUG level output.

    Any existing file handler is removed and replaced. The file is opened in
    append mode, so existing content is preserved.

    Args:
        filename: Name of the log file to create. Defaults to "debug.log".
    """
    global file_handler
    if file_handler is not None:
        disable_file_logging()

    file_handler = logging.FileHandler(filename)
    file_handler.setLevel(logging.DEBUG)  # Log everything to the file
    file_formatter = logging.Formatter("%(asctime)s:%(levelname)s:%(message)s")
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)


def disable_file_logging() -> None:
    """Disable file logging and close the file handle.

    Safe to call when file logging is not enabled.
    """
    global file_handler
    if file_handler is not None:
        logger.removeHandler(file_handler)
        file_handler.close()
        file_handler = None
