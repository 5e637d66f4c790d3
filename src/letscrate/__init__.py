"""LetsCrate command-line client."""

from letscrate.core.config import API_VERSION, VERSION

__version__ = VERSION

__all__ = ["API_VERSION", "VERSION", "__version__"]
