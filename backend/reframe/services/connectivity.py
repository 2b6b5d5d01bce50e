# connectivity: online/offline state owned by the host environment
# the host flips it; the pipeline reads it and reacts to the offline -> online edge

import logging

logger = logging.getLogger(__name__)


class Connectivity:
    """current online flag plus transition detection"""

    def __init__(self, online: bool = True):
        self._online = online

    @property
    def online(self) -> bool:
        return self._online

    def set_online(self, online: bool) -> bool:
        """update the flag. returns True only on an offline -> online transition."""
        restored = online and not self._online
        if online != self._online:
            logger.info(f"Connectivity changed: {'online' if online else 'offline'}")
        self._online = online
        return restored
