"""BaseService — abstract foundation for all meetcount services.

Every service receives the resolved :class:`MeetSettings` at construction
time and reads its input locations and counting options from it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from meetcount.config.settings import MeetSettings


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class CounterService(BaseService):
            def count_meetings(self, ...) -> ServiceResult:
                rule = self._settings.counting.remainder_rule
                ...
    """

    def __init__(self, settings: MeetSettings) -> None:
        self._settings = settings
