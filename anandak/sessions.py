from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from typing import Callable, Optional, Tuple

from .wizard import AssessmentWizard

logger = logging.getLogger(__name__)

DEFAULT_MAX_AGE = 2 * 60 * 60.0
DEFAULT_MAX_WIZARDS = 1000


class WizardStore:
    """In-process registry of live wizards keyed by wizard id.

    Entries are kept in least-recently-used order. A wizard not touched for
    ``max_age`` seconds is dropped, and the oldest ones go first once more
    than ``max_wizards`` are held.
    """

    def __init__(
        self,
        factory: Callable[[], AssessmentWizard],
        max_age: float = DEFAULT_MAX_AGE,
        max_wizards: int = DEFAULT_MAX_WIZARDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_age <= 0:
            logger.warning("Ignoring non-positive wizard max age %r", max_age)
            max_age = DEFAULT_MAX_AGE
        if max_wizards < 1:
            logger.warning("Ignoring wizard cap %r", max_wizards)
            max_wizards = DEFAULT_MAX_WIZARDS
        self.factory = factory
        self.max_age = max_age
        self.max_wizards = max_wizards
        self.clock = clock
        self._wizards: "OrderedDict[str, Tuple[AssessmentWizard, float]]" = OrderedDict()
        self._lock = threading.Lock()

    def _evict_expired(self, now: float) -> None:
        while self._wizards:
            wizard_id, (_, last_seen) = next(iter(self._wizards.items()))
            if now - last_seen < self.max_age:
                break
            del self._wizards[wizard_id]
            logger.debug("Evicted idle wizard %s", wizard_id)

    def create(self) -> AssessmentWizard:
        wizard = self.factory()
        with self._lock:
            now = self.clock()
            self._evict_expired(now)
            self._wizards[wizard.id] = (wizard, now)
            while len(self._wizards) > self.max_wizards:
                evicted_id, _ = self._wizards.popitem(last=False)
                logger.info("Wizard store full; evicted %s", evicted_id)
        return wizard

    def get(self, wizard_id: Optional[str]) -> Optional[AssessmentWizard]:
        if not wizard_id:
            return None
        with self._lock:
            now = self.clock()
            self._evict_expired(now)
            entry = self._wizards.get(wizard_id)
            if entry is None:
                return None
            self._wizards[wizard_id] = (entry[0], now)
            self._wizards.move_to_end(wizard_id)
            return entry[0]

    def discard(self, wizard_id: Optional[str]) -> None:
        if not wizard_id:
            return
        with self._lock:
            self._wizards.pop(wizard_id, None)

    def __contains__(self, wizard_id: object) -> bool:
        with self._lock:
            return wizard_id in self._wizards

    def __len__(self) -> int:
        with self._lock:
            return len(self._wizards)
