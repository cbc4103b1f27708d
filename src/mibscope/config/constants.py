"""Configuration constants.

Values here are fixed by the SCOS-2000 ASCII format or are hard caps; they
are NOT user-configurable. For configurable values, see models.py.
"""

# =============================================================================
# MIB table files
# =============================================================================

INDEX_TRIGGER_KINDS: tuple[str, ...] = ("ccf", "cdf")
"""An index is only built when at least one file of these kinds exists."""

# =============================================================================
# Query limits
# =============================================================================

SEARCH_MAX_LIMIT = 1000
"""Maximum ranked results for a single search."""

COMPLETION_MAX_LIMIT = 1000
"""Maximum completion items for a single request."""

TEXT_MATCH_MAX_LIMIT = 100
"""Maximum raw text matches for the grep-style fallback."""

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_MIB_GLOBS: tuple[str, ...] = ("**/*.mib", "**/*.txt")
"""Globs scanned by the text fallback when the index has no answer."""

DEFAULT_EXCLUDED_DIRS: tuple[str, ...] = ("node_modules", ".git", ".mibscope")
"""Directory names never descended into during discovery."""

CONFIG_DIR_NAME = ".mibscope"
"""Per-workspace configuration directory."""
