"""Neovim configuration installer (Python-first, step-driven).

Core design goals:
- Fail-fast ordered steps, no rollback
- Never destroy an existing config (backup-by-rename)
- Offline-first distribution via bundle archives
- Runtime binary probing over static version checks
- Centralized logging
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
