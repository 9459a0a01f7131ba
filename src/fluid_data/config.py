# ------------------------------------------------------------------------------
#  fluid-data
#  Copyright (c) 2025 Fabio Oddi
#
#  This file is part of fluid-data, released under the BSD 3-Clause License.
#  You may use, modify, and redistribute this file according to the terms of the
#  license. Attribution is required if this code is used in other works.
# ------------------------------------------------------------------------------

import json, logging
from pathlib import Path

from .logging_utils import configure_logging

logger = logging.getLogger("fluid.config")

_LEVEL_FIELDS = ("level", "file_level")
_FLAG_FIELDS = ("enabled", "to_console")

class Config:
    """Config."""
    def __init__(self, config_path: str = "", new_data: dict = {}):
        """Initialize the instance."""
        if config_path:
            self.config_path = config_path
            self.data = self.load_config()
        elif new_data:
            self.config_path = ""
            self.data = new_data
        else:
            raise ValueError("Either config_path or new_data must be provided")
        if not isinstance(self.data, dict):
            raise ValueError("The configuration root must be a JSON object")
        self._check_logging()

    def load_config(self):
        """Load config."""
        with open(self.config_path, 'r') as file:
            return json.load(file)

    def _check_logging(self):
        """Validate the optional logging section."""
        section = self.data.get('logging', {})
        if not isinstance(section, dict):
            raise ValueError("The 'logging' field must be a dictionary")
        for field in _FLAG_FIELDS:
            if field in section and not isinstance(section[field], bool):
                raise ValueError(f"Field '{field}' must be a boolean in logging")
        for field in _LEVEL_FIELDS:
            if field in section and (isinstance(section[field], bool) or not isinstance(section[field], (str, int))):
                raise ValueError(f"Field '{field}' must be a level name or number in logging")

    def apply(self, project_root=None):
        """Configure logging from the logging section; return the log file path if any."""
        log_path = configure_logging(
            self.logging,
            project_root=project_root or (Path(self.config_path).resolve().parent if self.config_path else None),
        )
        logger.info("Loaded configuration %s", self.config_path or "<inline>")
        return log_path

    @property
    def logging(self) -> dict:
        """Return the logging configuration."""
        return self.data.get('logging', {})
