"""
torcx - addon profile resolution

Resolves which optional, versioned OS-extension images are active on a host
by overlaying a user profile on top of an ordered stack of vendor profiles.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
