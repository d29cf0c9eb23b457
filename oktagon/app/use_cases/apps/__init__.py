"""App Use Cases"""

from .list_apps_use_case import ListAppsUseCase

__all__ = ["ListAppsUseCase"]
