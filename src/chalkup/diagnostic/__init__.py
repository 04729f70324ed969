# topmark:header:start
#
#   project      : Chalkup
#   file         : __init__.py
#   file_relpath : src/chalkup/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives and helpers.

Design:
    - Diagnostics are represented by immutable `Diagnostic` instances.
    - While parsing configuration, diagnostics are accumulated in a mutable
      `DiagnosticLog` (or any other `DiagnosticSink`).
    - Frozen objects (e.g. a built `StyleTable`) store diagnostics as an
      immutable `FrozenDiagnosticLog`.
"""

from __future__ import annotations

from chalkup.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    DiagnosticSink,
    DiagnosticStats,
    FrozenDiagnosticLog,
    compute_diagnostic_stats,
    diagnostics_counts_to_dict,
)

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "DiagnosticSink",
    "DiagnosticStats",
    "FrozenDiagnosticLog",
    "compute_diagnostic_stats",
    "diagnostics_counts_to_dict",
]
