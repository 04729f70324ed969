# topmark:header:start
#
#   project      : Chalkup
#   file         : model.py
#   file_relpath : src/chalkup/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types and helpers for Chalkup.

Diagnostics carry the soft, non-fatal findings of configuration parsing (for
example a style assignment without `=`). They are collected instead of being
sent to a process-wide logger only, so callers and tests can inspect what
happened while a [`StyleTable`][chalkup.rendering.style_table.StyleTable] was
built.

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * Diagnostic: immutable structured diagnostic payload (level + message).
    * DiagnosticStats: aggregated per-level counts.
    * DiagnosticSink: structural interface for anything accepting warnings.
    * DiagnosticLog: mutable collection with helpers for adding and
      summarizing diagnostics.
    * FrozenDiagnosticLog: immutable snapshot container for frozen objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Protocol, cast

from yachalk import chalk

from chalkup.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from chalkup.config.logging import ChalkupLogger


logger: ChalkupLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics collected during configuration parsing.

    Levels map to terminal colors and are ordered by importance: ERROR > WARNING > INFO.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Returns:
            Callable[[str], str]: The `yachalk` color function associated with this severity level.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error


class DiagnosticSink(Protocol):
    """Anything that accepts warnings emitted while parsing configuration."""

    def add_warning(self, message: str) -> None:
        """Record a warning message."""
        ...


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics.

    This is the default [`DiagnosticSink`][chalkup.diagnostic.model.DiagnosticSink]:
    it keeps every diagnostic in insertion order and exposes simple aggregation
    helpers (`stats`, `to_dict`) for reporting.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def freeze(self) -> FrozenDiagnosticLog:
        """Return an immutable snapshot of this log's diagnostics."""
        return FrozenDiagnosticLog(items=tuple(self.items))

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_info(self, message: str) -> None:
        """Add an ``info`` diagnostic to the diagnostic log.

        Args:
            message: The diagnostic message.
        """
        self._add(Diagnostic(DiagnosticLevel.INFO, message))

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic to the diagnostic log.

        Args:
            message: The diagnostic message.
        """
        self._add(Diagnostic(DiagnosticLevel.WARNING, message))

    def add_error(self, message: str) -> None:
        """Add an ``error`` diagnostic to the diagnostic log.

        Args:
            message: The diagnostic message.
        """
        self._add(Diagnostic(DiagnosticLevel.ERROR, message))

    def stats(self) -> DiagnosticStats:
        """Return per-level counts for diagnostics in this log."""
        return compute_diagnostic_stats(self.items)

    def has_warning(self) -> bool:
        """Return True if the DiagnosticLog contains warning diagnostics."""
        return any(d.level == DiagnosticLevel.WARNING for d in self.items)

    def has_error(self) -> bool:
        """Return True if the DiagnosticLog contains error diagnostics."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity.

        Returns:
            Mapping with keys ``"info"``, ``"warning"``, and ``"error"``
            reflecting the number of diagnostics at each level.
        """
        return diagnostics_counts_to_dict(self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class FrozenDiagnosticLog:
    """Immutable diagnostic container.

    `FrozenDiagnosticLog` is the immutable counterpart to `DiagnosticLog`. It is
    stored on frozen objects (e.g. a built `StyleTable`) where mutation is not
    permitted.
    """

    items: tuple[Diagnostic, ...] = ()

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over contained diagnostics in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def stats(self) -> DiagnosticStats:
        """Return aggregated per-level counts for the contained diagnostics."""
        return compute_diagnostic_stats(self.items)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity."""
        return diagnostics_counts_to_dict(self.items)


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics.

    Args:
        diagnostics: the diagnostics to count.

    Returns:
        Per-level counts for the given diagnostics.
    """
    items: list[Diagnostic] = list(diagnostics)
    n_info: int = sum(1 for d in items if d.level == DiagnosticLevel.INFO)
    n_warn: int = sum(1 for d in items if d.level == DiagnosticLevel.WARNING)
    n_err: int = sum(1 for d in items if d.level == DiagnosticLevel.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)


def diagnostics_counts_to_dict(diagnostics: Iterable[Diagnostic]) -> dict[str, int]:
    """Return a JSON-friendly mapping of counts by severity for any iterable."""
    stats: DiagnosticStats = compute_diagnostic_stats(diagnostics)
    return {
        "info": stats.n_info,
        "warning": stats.n_warning,
        "error": stats.n_error,
    }
