"""
YAML implementation of ExerciseCatalogSource.

Reads the bundled exercise list (``shared/dictionaries/exercises.yaml`` by
default). The file is a YAML list of mappings, one per exercise.
"""
import logging
import pathlib
from typing import Any, Dict, List, Union

import yaml

from application.exceptions import CatalogLoadError

logger = logging.getLogger(__name__)

ROOT = pathlib.Path(__file__).resolve().parents[2]

DEFAULT_CATALOG_PATH = ROOT / "shared/dictionaries/exercises.yaml"


class YamlExerciseCatalogSource:
    """
    YAML file implementation of ExerciseCatalogSource protocol.
    """

    def __init__(self, path: Union[str, pathlib.Path, None] = None):
        self._path = pathlib.Path(path) if path else DEFAULT_CATALOG_PATH

    @property
    def path(self) -> pathlib.Path:
        return self._path

    def load(self) -> List[Dict[str, Any]]:
        """Read and parse the catalog file."""
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise CatalogLoadError(f"Cannot read exercise catalog {self._path}: {e}") from e

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise CatalogLoadError(f"Invalid YAML in exercise catalog {self._path}: {e}") from e

        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise CatalogLoadError(f"Exercise catalog {self._path} must be a list of mappings")

        logger.debug(f"Read {len(data)} catalog entries from {self._path}")
        return data
