"""JPs Packager: builds macOS installer packages with pkgbuild.

Core design goals:
- One blocking build call, one external process
- Postinstall scripts staged in a throwaway directory
- Append-only build log owned by the caller
- Preferences persisted between runs
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
