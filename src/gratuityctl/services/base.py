"""BaseService — shared foundation for gratuityctl services."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gratuityctl.config.settings import GratuitySettings


class BaseService:
    """Base for service-layer classes.

    Every service receives the frozen settings at construction time and
    reads configuration sections from it.

    Usage::

        class GratuityService(BaseService):
            def calculate(self, ...) -> ServiceResult:
                policy = self._settings.input
                ...
    """

    def __init__(self, settings: GratuitySettings) -> None:
        self._settings = settings
