"""
State model for the account aggregate.

State is a value: every transition builds a new AccountState, so any
reference held by a caller stays a valid snapshot.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, List


@dataclass(frozen=True)
class AccountState:
    """
    Materialized view of one account.

    Fields:
        owner: Account owner ("" until created)
        balance: Current balance, never negative
        active: True once AccountCreated has been applied
    """
    owner: str = ""
    balance: int = 0
    active: bool = False

    @staticmethod
    def initial() -> "AccountState":
        return AccountState()

    def with_balance(self, balance: int) -> "AccountState":
        return replace(self, balance=balance)

    def violations(self) -> List[str]:
        """
        List broken state invariants (empty when the state is well-formed).
        """
        problems = []
        if self.balance < 0:
            problems.append(f"negative balance {self.balance}")
        if not self.active and (self.balance != 0 or self.owner != ""):
            problems.append("inactive account carries owner or balance")
        return problems

    def to_dict(self) -> Dict[str, Any]:
        return {"owner": self.owner, "balance": self.balance, "active": self.active}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "AccountState":
        data = data or {}
        return AccountState(
            owner=str(data.get("owner", "")),
            balance=int(data.get("balance", 0)),
            active=bool(data.get("active", False)),
        )
