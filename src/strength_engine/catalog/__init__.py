"""Exercise catalog: exercises, movement patterns, conflicts and base weights."""

from strength_engine.catalog.library import ExerciseCatalog, default_catalog

__all__ = ["ExerciseCatalog", "default_catalog"]
