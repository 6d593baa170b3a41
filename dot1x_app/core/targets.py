"""Session-scoped list of vendor/platform targets."""

import logging
import threading
from typing import Iterator

from dot1x_app.core.exceptions import DuplicateTargetError, TargetNotFoundError
from dot1x_app.schemas.targets import VendorTarget

logger = logging.getLogger(__name__)


class TargetList:
    """Ordered, duplicate-free targets for multi-vendor rendering."""

    def __init__(self, targets: list[VendorTarget] | None = None):
        self._targets: list[VendorTarget] = []
        self._lock = threading.Lock()
        for target in targets or []:
            self.add(target)

    def add(self, target: VendorTarget) -> None:
        with self._lock:
            if target in self._targets:
                raise DuplicateTargetError(target.vendor, target.platform)
            self._targets.append(target)
        logger.debug(f"Added target {target}")

    def remove(self, target: VendorTarget) -> None:
        with self._lock:
            if target not in self._targets:
                raise TargetNotFoundError(target.vendor, target.platform)
            self._targets.remove(target)
        logger.debug(f"Removed target {target}")

    def clear(self) -> None:
        with self._lock:
            self._targets.clear()

    def to_list(self) -> list[VendorTarget]:
        with self._lock:
            return list(self._targets)

    def __iter__(self) -> Iterator[VendorTarget]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return len(self._targets)

    def __contains__(self, target: object) -> bool:
        return target in self._targets
