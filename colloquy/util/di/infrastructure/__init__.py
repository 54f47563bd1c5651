"""Infrastructure providers.

Importing ``persistence`` registers ProdPersistenceProvider as a subclass
of PersistenceProvider, which is how the production variant is found.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
