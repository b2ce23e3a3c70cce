"""
Infrastructure Catalog Layer.

Bundled exercise catalog sources implementing application.ports.ExerciseCatalogSource.
"""

from infrastructure.catalog.yaml_catalog_source import YamlExerciseCatalogSource

__all__ = [
    "YamlExerciseCatalogSource",
]
