"""
typedocgen: template driven reference documentation for Python types.

Types are grouped into categories, and every type plus a per-category index
is rendered through configurable placeholder templates.
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .config import Config
from .documentation import DocumentationCategory, DocumentationGenerator

__all__ = ["Config", "DocumentationCategory", "DocumentationGenerator"]
