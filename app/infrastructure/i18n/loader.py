"""Resource loading interface and implementations.

Loaders fetch JSON-shaped documents and merge them into a ResourceStore.
They never raise for a failed source: each source produces an
OperationResult, and a failed source leaves already loaded resources intact.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Optional, Tuple, Type

import requests
import yaml

from infrastructure.configuration import settings
from infrastructure.i18n.models import InvalidResourceError
from infrastructure.i18n.store import ResourceStore
from infrastructure.logging import bind_scope, get_module_logger
from infrastructure.operations import (
    OperationResult,
    classify_file_error,
    classify_http_error,
    classify_payload_error,
)

logger = get_module_logger()

RESOURCE_FILE_SUFFIXES = (".json", ".yml", ".yaml")


def _is_resource_file(path: Path) -> bool:
    return path.is_file() and path.suffix.lower() in RESOURCE_FILE_SUFFIXES


class ResourceLoader(ABC):
    """Abstract base for resource loaders.

    Implementations define how a source (URL, file path, ...) is fetched
    and decoded, and which exceptions a failed fetch may raise.
    """

    #: Exceptions from fetch() that are reported as a failed result
    fetch_errors: Tuple[Type[BaseException], ...] = ()

    @abstractmethod
    def fetch(self, source: str) -> Any:
        """Fetch and decode one source.

        Args:
            source: Location of the document.

        Returns:
            Decoded JSON-shaped value.
        """
        pass

    @abstractmethod
    def classify_error(self, exc: Exception) -> OperationResult:
        """Convert an exception raised by fetch() into a failed result."""
        pass

    def load_resource(
        self,
        store: ResourceStore,
        source: str,
        lang: Optional[str] = None,
        path: Optional[str] = None,
    ) -> OperationResult:
        """Fetch one source and merge it into ``store``.

        Args:
            store: ResourceStore receiving the resource.
            source: Location of the document.
            lang: Optional language to nest the document under.
            path: Optional dotted path below ``lang``.

        Returns:
            OperationResult describing the outcome for ``source``.
        """
        scope = f"{type(self).__name__}.load_resource"
        with bind_scope(scope, source=source, lang=lang, path=path):
            logger.debug("loading_resource")
            try:
                payload = self.fetch(source)
                store.add_resource(payload, lang, path)
            except InvalidResourceError as exc:
                result = classify_payload_error(exc)
            except self.fetch_errors as exc:
                result = self.classify_error(exc)
            else:
                logger.info("resource_loaded")
                return OperationResult.success(
                    message=f"Loaded {source}"
                ).with_subject(source)

            logger.error(
                "resource_load_failed",
                status=result.status.value,
                error_code=result.error_code,
                error=result.message,
            )
            return result.with_subject(source)

    def load_resources(self, store: ResourceStore, *sources: str) -> OperationResult:
        """Load documents already shaped as ``{lang: {...}}``."""
        return self.load_language_path_resources(store, None, None, *sources)

    def load_language_resources(
        self, store: ResourceStore, lang: Optional[str], *sources: str
    ) -> OperationResult:
        """Load documents holding the content of a single language."""
        return self.load_language_path_resources(store, lang, None, *sources)

    def load_language_path_resources(
        self,
        store: ResourceStore,
        lang: Optional[str],
        path: Optional[str],
        *sources: str,
    ) -> OperationResult:
        """Load several sources under the same language and path.

        Returns:
            A combined OperationResult whose ``data`` holds one result per
            source, in order. It succeeds only if every source loaded.
        """
        scope = f"{type(self).__name__}.load_resources"
        with bind_scope(scope, lang=lang, path=path, source_count=len(sources)):
            if not sources:
                logger.warning("no_sources_given")
                return OperationResult.permanent_error(
                    "No sources given", error_code="NO_SOURCES"
                )

            results: List[OperationResult] = []
            for index, source in enumerate(sources):
                if isinstance(source, str) and source.strip():
                    result = self.load_resource(store, source, lang, path)
                else:
                    logger.warning("invalid_source", index=index, source=repr(source))
                    result = OperationResult.permanent_error(
                        f"Invalid source: {source!r}", error_code="INVALID_SOURCE"
                    )
                subject = f"{index}. lang={lang}, path={path}, source={source}"
                results.append(result.with_subject(subject))

            combined = OperationResult.combine(
                results, f"Loaded {len(results)} resource source(s)"
            )
            logger.info(
                "resources_loaded",
                succeeded=sum(1 for result in results if result.is_success),
                failed=sum(1 for result in results if not result.is_success),
            )
            return combined


class RemoteResourceLoader(ResourceLoader):
    """Loader for JSON documents served over HTTP.

    Attributes:
        timeout: Request timeout in seconds.
        session: Requests session with connection pooling.
    """

    fetch_errors = (requests.RequestException, ValueError)

    def __init__(
        self,
        timeout: Optional[int] = None,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize remote loader.

        Args:
            timeout: Request timeout (default: I18N_REMOTE_TIMEOUT).
            user_agent: User-Agent header (default: I18N_USER_AGENT).
            session: Optional pre-configured session.
        """
        self.timeout = timeout or settings.i18n.I18N_REMOTE_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "User-Agent": user_agent or settings.i18n.I18N_USER_AGENT,
                "Accept": "application/json",
            }
        )

    def fetch(self, source: str) -> Any:
        response = self.session.get(source, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def classify_error(self, exc: Exception) -> OperationResult:
        # requests' JSONDecodeError is both a ValueError and a RequestException
        if isinstance(exc, ValueError):
            return classify_payload_error(exc)
        return classify_http_error(exc)


class FileResourceLoader(ResourceLoader):
    """Loader for JSON and YAML resource files.

    Relative sources are resolved against ``base_dir``. The directory layout
    understood by load_directory() is::

        <base_dir>/en.json            -> merged under "en"
        <base_dir>/en/seasons.json    -> merged under "en.seasons"

    Attributes:
        base_dir: Directory holding resource files.
    """

    fetch_errors = (OSError, ValueError, yaml.YAMLError)

    def __init__(self, base_dir: Path):
        """Initialize file loader.

        Args:
            base_dir: Directory holding resource files.

        Raises:
            ValueError: If ``base_dir`` does not exist.
        """
        self.base_dir = Path(base_dir)

        if not self.base_dir.is_dir():
            raise ValueError(f"Resources directory not found: {self.base_dir}")

    def resolve_path(self, source: str) -> Path:
        path = Path(source)
        return path if path.is_absolute() else self.base_dir / path

    def fetch(self, source: str) -> Any:
        path = self.resolve_path(source)
        suffix = path.suffix.lower()
        if suffix not in RESOURCE_FILE_SUFFIXES:
            raise InvalidResourceError(f"Unsupported resource file type: {path.name}")

        with open(path, "r", encoding="utf-8") as f:
            if suffix == ".json":
                return json.load(f)
            return yaml.safe_load(f)

    def classify_error(self, exc: Exception) -> OperationResult:
        if isinstance(exc, OSError):
            return classify_file_error(exc)
        return classify_payload_error(exc)

    def discover(self) -> List[Tuple[str, Optional[str], str]]:
        """List resource files found in ``base_dir``.

        Returns:
            Sorted (lang, path, source) tuples. ``path`` is None for
            top-level language files.
        """
        found: List[Tuple[str, Optional[str], str]] = []
        for entry in sorted(self.base_dir.iterdir()):
            if _is_resource_file(entry):
                found.append((entry.stem, None, entry.name))
            elif entry.is_dir():
                for child in sorted(entry.iterdir()):
                    if _is_resource_file(child):
                        found.append(
                            (entry.name, child.stem, f"{entry.name}/{child.name}")
                        )
        return found

    def load_directory(self, store: ResourceStore) -> OperationResult:
        """Load every resource file found by discover().

        Returns:
            Combined OperationResult with one child per file.
        """
        scope = f"{type(self).__name__}.load_directory"
        with bind_scope(scope, base_dir=str(self.base_dir)):
            files = self.discover()
            if not files:
                logger.warning("no_resource_files_found")
                return OperationResult.not_found(
                    f"No resource files found in {self.base_dir}",
                    error_code="NO_SOURCES",
                )

            results = [
                self.load_resource(store, source, lang, path)
                for lang, path, source in files
            ]
            return OperationResult.combine(
                results, f"Loaded {len(results)} resource file(s)"
            )
