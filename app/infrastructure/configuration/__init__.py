"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation settings class (for testing)

Example:
    ```python
    from infrastructure.configuration import settings

    default_lang = settings.i18n.I18N_DEFAULT_LANGUAGE

    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.i18n import I18nSettings
from infrastructure.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
