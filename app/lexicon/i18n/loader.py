"""Translation loading interface and implementations.

Loaders parse translation sources and hand the engine one nested mapping
per locale. They never resolve keys themselves.
"""

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple, Union

import yaml

from lexicon.i18n.exceptions import InvalidLocaleData
from lexicon.i18n.models import Alias
from lexicon.logging import get_module_logger

logger = get_module_logger()

# ":incident.created" in YAML stands for an alias to that key
ALIAS_PATTERN = re.compile(r"^:([A-Za-z_][\w.\-]*)$")

YAML_SUFFIXES = (".yml", ".yaml")

LocaleData = Tuple[str, Dict[str, Any]]


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations define how translation sources are found and parsed.
    """

    @abstractmethod
    def load_file(self, filename: Path) -> List[LocaleData]:
        """Load every locale defined in a single source.

        Args:
            filename: Source to parse.

        Returns:
            List of (locale, translation tree) pairs in source order.

        Raises:
            InvalidLocaleData: If the source cannot be parsed or is not a
                mapping of locale -> mapping.
        """
        pass

    @abstractmethod
    def load_all(self) -> List[LocaleData]:
        """Load every configured source.

        Returns:
            (locale, translation tree) pairs in load order; later pairs
            override earlier ones when merged.
        """
        pass

    def clear_cache(self) -> None:
        """Forget any parsed sources so the next load reads them again."""
        pass


def coerce_node(node: Any) -> Any:
    """Convert parsed YAML into engine nodes.

    Mapping keys become strings and ":name" scalars become Alias("name").
    """
    if isinstance(node, dict):
        return {str(key): coerce_node(value) for key, value in node.items()}
    if isinstance(node, list):
        return [coerce_node(item) for item in node]
    if isinstance(node, str):
        match = ALIAS_PATTERN.match(node)
        if match:
            return Alias(match.group(1))
    return node


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML translation files.

    Each file holds a mapping of locale -> translation tree:

        en:
          incident:
            created: "Incident %{incident_id} created"
            opened: :incident.created

    Attributes:
        load_path: Files and directories to load. Directories contribute
            their *.yml and *.yaml files in sorted order.
        cache: Optional cache of parsed files (path -> locale data).
    """

    def __init__(
        self,
        load_path: Iterable[Union[str, Path]],
        use_cache: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            load_path: Files and directories to load.
            use_cache: Whether to cache parsed files in memory.
        """
        self.load_path = [Path(path) for path in load_path]
        self.use_cache = use_cache
        self.cache: Dict[Path, List[LocaleData]] = {}

        logger.info(
            "initialized_yaml_loader",
            load_path=[str(path) for path in self.load_path],
            use_cache=use_cache,
        )

    def files(self) -> List[Path]:
        """Expand the load path into the list of files to parse.

        Raises:
            InvalidLocaleData: If a load path entry does not exist.
        """
        result: List[Path] = []
        for path in self.load_path:
            if path.is_dir():
                result.extend(
                    sorted(
                        child
                        for child in path.iterdir()
                        if child.is_file() and child.suffix in YAML_SUFFIXES
                    )
                )
            elif path.is_file():
                result.append(path)
            else:
                raise InvalidLocaleData(path, "no such file or directory")
        return result

    def load_file(self, filename: Path) -> List[LocaleData]:
        filename = Path(filename)
        if self.use_cache and filename in self.cache:
            logger.debug("loaded_from_cache", file=str(filename))
            return self.cache[filename]

        try:
            with open(filename, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise InvalidLocaleData(filename, repr(e)) from e

        if not isinstance(data, dict):
            raise InvalidLocaleData(
                filename, "expects it to return a mapping, but does not"
            )

        result: List[LocaleData] = []
        for locale, tree in data.items():
            if tree is None:
                tree = {}
            if not isinstance(tree, dict):
                raise InvalidLocaleData(
                    filename, f"translations for {locale!r} must be a mapping"
                )
            result.append((str(locale), coerce_node(tree)))

        logger.info(
            "loaded_translations",
            file=str(filename),
            locales=[locale for locale, _ in result],
        )

        if self.use_cache:
            self.cache[filename] = result
        return result

    def load_all(self) -> List[LocaleData]:
        result: List[LocaleData] = []
        for filename in self.files():
            result.extend(self.load_file(filename))
        return result

    def clear_cache(self) -> None:
        """Clear all cached files."""
        self.cache.clear()
        logger.info("cleared_translation_cache")
