from __future__ import annotations

from typing import Dict, Optional, Protocol


class SystemConfigRepository(Protocol):
    def get_all(self) -> Dict[str, Optional[str]]:
        """All key/value pairs of the system configuration store."""

        raise NotImplementedError
