"""Grammar registrations.

Importing a grammar module registers it via side effects.
"""

from .cell import grammar as cell_grammar  # noqa: F401
from .qpi import grammar as qpi_grammar  # noqa: F401
