from __future__ import annotations

import logging
from typing import Optional

from .model import SystemConfig
from .repository import SystemConfigRepository

logger = logging.getLogger(__name__)


class SystemConfigService:
    """Load SystemConfig from the key/value store.

    Without a repository the built-in defaults are used.
    """

    def __init__(self, store: Optional[SystemConfigRepository] = None):
        self._store = store

    def load(self) -> SystemConfig:
        if self._store is None:
            return SystemConfig()

        config = SystemConfig.from_key_values(self._store.get_all())
        logger.debug("System config loaded: %s", config)
        return config
