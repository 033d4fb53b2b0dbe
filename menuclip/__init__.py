"""Terminal menu navigator with clipboard copy of the selected template."""

from menuclip.__version__ import __version__

__all__ = ["__version__"]
