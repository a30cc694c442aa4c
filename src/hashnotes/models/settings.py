"""Application settings model."""

from enum import Enum

from pydantic import Field

from hashnotes.models.base import CamelModel


class Theme(str, Enum):
    """UI colour theme."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class SortBy(str, Enum):
    """Field used to order notes when no search query is active."""

    UPDATED = "updated"
    CREATED = "created"
    TITLE = "title"


class ViewMode(str, Enum):
    """Note list layout."""

    GRID = "grid"
    LIST = "list"


class AppSettings(CamelModel):
    """Process-wide settings, persisted after every change."""

    theme: Theme = Field(default=Theme.SYSTEM)
    sort_by: SortBy = Field(default=SortBy.UPDATED)
    view_mode: ViewMode = Field(default=ViewMode.GRID)
