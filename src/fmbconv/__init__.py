"""fmbconv - Oracle Forms FMB export analysis.

fmbconv reads frmf2xml exports, classifies form items into target
application fields and analyzes PL/SQL triggers for business rules.
"""

__version__ = "0.3.0"
__description__ = "Oracle Forms FMB export field classifier and trigger analyzer"

from fmbconv.config import FmbconvConfig

__all__ = [
    "__version__",
    "__description__",
    "FmbconvConfig",
]
