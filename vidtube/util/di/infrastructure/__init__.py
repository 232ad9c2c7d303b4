"""Infrastructure providers."""

# Import base
from .persistence import PersistenceProvider

# Import implementation (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
