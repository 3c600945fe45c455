"""Writing generated artifacts to disk."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.markup import escape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Artifact:
    """A generated file."""

    filename: str
    content: str
    label: str  # Human-readable name used in messages


@dataclass(frozen=True)
class WriteResult:
    """Outcome of writing one artifact."""

    artifact: Artifact
    path: Path
    error: OSError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _write_text(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")


async def emit_artifacts(
    artifacts: Sequence[Artifact],
    directory: Path,
    writer: Callable[[Path, str], None] = _write_text,
) -> list[WriteResult]:
    """Write all artifacts concurrently and wait for every write to settle.

    A failed write does not cancel or roll back the others.

    Args:
        artifacts: Files to write.
        directory: Directory the files are written into.
        writer: Blocking function performing a single write.

    Returns:
        One result per artifact, in input order.
    """
    paths = [directory / artifact.filename for artifact in artifacts]
    outcomes = await asyncio.gather(
        *(asyncio.to_thread(writer, path, artifact.content) for path, artifact in zip(paths, artifacts)),
        return_exceptions=True,
    )

    results: list[WriteResult] = []
    for artifact, path, outcome in zip(artifacts, paths, outcomes):
        if isinstance(outcome, OSError):
            logger.error("Error saving %s to %s: %s", artifact.label, path, outcome)
            results.append(WriteResult(artifact=artifact, path=path, error=outcome))
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            logger.debug("Wrote %d bytes to %s", len(artifact.content), path)
            results.append(WriteResult(artifact=artifact, path=path))
    return results


def report_results(results: Sequence[WriteResult], console: Console) -> None:
    """Print one line per artifact describing whether it was saved."""
    for result in results:
        if result.ok:
            console.print(f"[green]✓ {result.artifact.label} successfully saved to {escape(str(result.path))}[/green]")
        else:
            console.print(f"[red]Error saving {result.artifact.label}: {escape(str(result.error))}[/red]")
