"""
Audit sinks: external consumers of the event history.

A sink receives an immutable tuple of ChainRecords and formats it somewhere.
Sinks never write back to the log.
"""

import logging
from typing import Optional, Protocol, Sequence, TextIO

from rich.console import Console
from rich.table import Table

from ..core.canonical import canonical_json_str
from ..log.integrity import ChainRecord


class AuditSink(Protocol):
    def write(self, records: Sequence[ChainRecord]) -> None:
        ...


class LoggingAuditSink:
    """One INFO line per event."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(__name__)

    def write(self, records: Sequence[ChainRecord]) -> None:
        for rec in records:
            self.logger.info(
                f"seq={rec.seq} type={rec.event.type} id={rec.event.id} "
                f"ts={rec.event.ts} payload={canonical_json_str(rec.event.payload())} "
                f"hash={rec.event_hash[:12]}"
            )


class JsonLinesAuditSink:
    """Canonical JSON, one record per line."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def write(self, records: Sequence[ChainRecord]) -> None:
        for rec in records:
            self.stream.write(canonical_json_str(rec.to_dict()) + "\n")
        self.stream.flush()


class RichTableAuditSink:
    """Renders the history as a rich table."""

    def __init__(self, console: Optional[Console] = None, title: str = "Event Log") -> None:
        self.console = console or Console()
        self.title = title

    def write(self, records: Sequence[ChainRecord]) -> None:
        table = Table(title=self.title)
        table.add_column("Seq", style="cyan", justify="right")
        table.add_column("Type", style="green")
        table.add_column("Payload")
        table.add_column("TS", justify="right")
        table.add_column("Hash", style="yellow")

        for rec in records:
            table.add_row(
                str(rec.seq),
                rec.event.type,
                canonical_json_str(rec.event.payload()),
                str(rec.event.ts),
                rec.event_hash[:16],
            )

        self.console.print(table)
