"""
nozombie - find and delete React components that nothing imports.
"""

from .__version__ import __version__

__all__ = ["__version__"]
