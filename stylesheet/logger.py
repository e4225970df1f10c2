import os, sys, logging
from typing import Optional
from functools import partial

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

class Logger:
    def __init__(self, name: str, logging_enabled: bool = False, log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        if logging_enabled:
            self._logger.setLevel(logging.DEBUG)
            # Handlers live on the shared named logger; keep records off the root
            self._logger.propagate = False
            if log_file == "-":
                if not self._has_stdout_handler():
                    self._add_handler(logging.StreamHandler(sys.stdout))
            else:
                if log_file is None:
                    project_root = os.path.dirname(os.path.dirname(__file__))
                    os.makedirs(os.path.join(project_root, 'logs'), exist_ok=True)
                    log_file = os.path.join(project_root, 'logs', 'stylesheet_debug.log')
                if not self._has_file_handler(log_file):
                    self._add_handler(logging.FileHandler(log_file))
        elif not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error', 'critical']:
            setattr(self, level, partial(self._log, level))

    def _add_handler(self, handler: logging.Handler) -> None:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self._logger.addHandler(handler)

    def _has_stdout_handler(self) -> bool:
        return any(
            type(h) is logging.StreamHandler and h.stream is sys.stdout
            for h in self._logger.handlers
        )

    def _has_file_handler(self, log_file: str) -> bool:
        path = os.path.abspath(log_file)
        return any(
            isinstance(h, logging.FileHandler) and h.baseFilename == path
            for h in self._logger.handlers
        )

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
