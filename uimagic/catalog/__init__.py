from .definitions import DEFAULT_COMPONENTS
from .library import ComponentCatalog

__all__ = ["ComponentCatalog", "DEFAULT_COMPONENTS"]
