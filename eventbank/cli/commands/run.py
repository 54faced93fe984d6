"""
Run command: apply operations to a fresh account, then audit it.
"""

import json
from typing import Any, Dict, List, Tuple, Union

import typer
from rich.console import Console
from rich.table import Table

from eventbank.audit.report import build_audit_report
from eventbank.audit.sinks import RichTableAuditSink
from eventbank.config import Settings
from eventbank.core.errors import ConfigError, InvariantViolation, UsageError
from eventbank.wiring import build_account

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_USAGE = 2
EXIT_INCONSISTENT = 3

OPERATIONS = ("create", "deposit", "withdraw")

console = Console()

Operation = Tuple[str, Union[str, int]]


def parse_operation(text: str) -> Operation:
    """
    Parse "create:<owner>", "deposit:<n>" or "withdraw:<n>".

    Raises:
        UsageError: On unknown operations, blank owners or non-positive amounts
    """
    name, sep, arg = text.partition(":")
    name = name.strip().lower()
    if not sep or name not in OPERATIONS:
        raise UsageError(f"expected create:<owner>, deposit:<n> or withdraw:<n>, got {text!r}")
    if name == "create":
        if not arg.strip():
            raise UsageError(f"missing owner in {text!r}")
        return name, arg.strip()
    try:
        amount = int(arg)
    except ValueError:
        raise UsageError(f"amount must be an integer in {text!r}") from None
    if amount <= 0:
        raise UsageError(f"amount must be positive in {text!r}")
    return name, amount


def _print_error(message: str, json_output: bool) -> None:
    if json_output:
        print(json.dumps({"error": message}))
    else:
        console.print(f"[red]Error:[/red] {message}")


def run_command(
    operations: List[str] = typer.Argument(..., help="Operations, e.g. create:Alice deposit:500"),
    account_id: str = typer.Option("account", "--account", "-a", help="Account id used in logs"),
    audit: bool = typer.Option(False, "--audit", help="Show the event log"),
    keep_going: bool = typer.Option(False, "--keep-going", "-k", help="Continue past rejected operations"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Apply operations in order and verify replay equivalence.

    Exit codes: 0 ok, 1 an operation was rejected, 2 usage/config error,
    3 replay or hash chain mismatch.

    Examples:
        eventbank run create:Alice deposit:500 withdraw:120
        eventbank run create:Alice withdraw:100 --keep-going --json
    """
    try:
        settings = Settings.from_env()
        parsed = [parse_operation(op) for op in operations]
    except (UsageError, ConfigError) as e:
        _print_error(str(e), json_output)
        raise typer.Exit(EXIT_USAGE)

    account = build_account(settings, account_id=account_id)

    rejected: List[Dict[str, Any]] = []
    for text, (name, arg) in zip(operations, parsed):
        try:
            getattr(account, name)(arg)
        except InvariantViolation as e:
            rejected.append({"operation": text, "kind": e.kind.value, "error": str(e)})
            if not keep_going:
                break

    report = build_audit_report(account)
    consistent = report["replay_matches"] and report["chain"]["valid"]

    if json_output:
        output = dict(report)
        output["rejected"] = rejected
        if audit:
            output["history"] = [rec.to_dict() for rec in account.records()]
        print(json.dumps(output, indent=2))
    else:
        for r in rejected:
            console.print(f"[red]✗ {r['operation']}[/red] rejected: {r['kind']}")

        state = report["state"] or {}
        table = Table(title=f"Account {account.account_id}", show_header=False)
        table.add_row("Owner", state.get("owner", ""))
        table.add_row("Balance", str(state.get("balance", "")))
        table.add_row("Active", str(state.get("active", "")))
        table.add_row("Events", str(report["events"]))
        table.add_row("State hash", str(report["state_hash"]))
        console.print(table)

        if audit:
            account.publish(RichTableAuditSink(console))

        if consistent:
            console.print("[green]✓ Replay matches cached state[/green]")
        else:
            console.print("[red]✗ Replay does not match cached state[/red]")

    if not consistent:
        raise typer.Exit(EXIT_INCONSISTENT)
    if rejected:
        raise typer.Exit(EXIT_REJECTED)
