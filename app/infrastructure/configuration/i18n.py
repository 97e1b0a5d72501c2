"""Translation infrastructure settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Translation resource configuration.

    Environment Variables:
        I18N_DEFAULT_LANGUAGE: Language a new translator starts with (default: en)
        I18N_RESOURCES_DIR: Directory of JSON/YAML resource files to preload
        I18N_REMOTE_TIMEOUT: Timeout in seconds for remote resource requests (default: 10)
        I18N_USER_AGENT: User-Agent header sent with remote resource requests

    Example:
        ```python
        from infrastructure.configuration import settings

        lang = settings.i18n.I18N_DEFAULT_LANGUAGE
        ```
    """

    I18N_DEFAULT_LANGUAGE: str = Field(default="en", alias="I18N_DEFAULT_LANGUAGE")
    I18N_RESOURCES_DIR: Optional[Path] = Field(
        default=None, alias="I18N_RESOURCES_DIR"
    )
    I18N_REMOTE_TIMEOUT: int = Field(default=10, alias="I18N_REMOTE_TIMEOUT")
    I18N_USER_AGENT: str = Field(
        default="translation-resolver/1.0", alias="I18N_USER_AGENT"
    )
