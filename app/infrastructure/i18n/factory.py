"""Factory functions for creating i18n components.

Provides convenience functions for initializing translators from the
application settings.
"""

from pathlib import Path
from typing import Optional

import structlog
from infrastructure.configuration import Settings
from infrastructure.configuration import settings as default_settings
from infrastructure.i18n.loader import FileResourceLoader
from infrastructure.i18n.translator import Translator

logger = structlog.get_logger()


def create_translator(
    settings: Optional[Settings] = None,
    resources_dir: Optional[Path] = None,
    preload: bool = True,
) -> Translator:
    """Create and configure a Translator instance.

    The translator starts in I18N_DEFAULT_LANGUAGE. When a resources
    directory is given (or configured through I18N_RESOURCES_DIR) and
    ``preload`` is set, every resource file in it is loaded. A directory that
    fails to load is logged; the translator is still returned.

    Args:
        settings: Settings to read defaults from (default: module singleton)
        resources_dir: Directory of JSON/YAML resource files
        preload: Whether to load the resources directory immediately

    Returns:
        Translator: Configured translator instance

    Usage:
        # Use configured defaults
        translator = create_translator()

        # Custom resources directory
        translator = create_translator(resources_dir=Path("/srv/locales"))
    """
    settings = settings or default_settings
    translator = Translator(current_lang=settings.i18n.I18N_DEFAULT_LANGUAGE)

    resources_dir = resources_dir or settings.i18n.I18N_RESOURCES_DIR
    if resources_dir is None or not preload:
        logger.info(
            "translator_created_empty",
            current_lang=translator.current_lang,
        )
        return translator

    try:
        loader = FileResourceLoader(resources_dir)
    except ValueError as e:
        logger.warning(
            "resources_dir_unavailable",
            resources_dir=str(resources_dir),
            error=str(e),
        )
        return translator

    result = loader.load_directory(translator.store)
    logger.info(
        "translator_created_with_preload",
        resources_dir=str(resources_dir),
        success=result.is_success,
        languages=translator.get_available_languages(),
    )
    return translator
