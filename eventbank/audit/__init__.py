"""
Audit consumers of the event history.
"""

from .sinks import AuditSink, LoggingAuditSink, JsonLinesAuditSink, RichTableAuditSink
from .report import build_audit_report

__all__ = [
    "AuditSink",
    "LoggingAuditSink",
    "JsonLinesAuditSink",
    "RichTableAuditSink",
    "build_audit_report",
]
