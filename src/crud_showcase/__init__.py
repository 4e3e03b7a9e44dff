"""crud-showcase: five small record-keeping console programs."""

from crud_showcase.infrastructure.settings import APP_VERSION

__version__ = APP_VERSION
