"""Host backed by a board snapshot file.

Snapshot format::

    {
        "board": {"id": "...", "name": "..."},
        "lists": [{"id": "...", "name": "..."}],
        "cards": [{"id": "...", "name": "...", "desc": "...", "idList": "...", ...}]
    }

Secrets live in memory and every UI call is recorded in ``actions`` instead
of being rendered.
"""

import copy
import json
from pathlib import Path
from typing import Any, Optional

from board_insights.host.base import HostContext, PopupItem


class SnapshotError(ValueError):
    """Snapshot file is missing data the host needs."""
    pass


class SnapshotHost(HostContext):
    """HostContext over an in-memory board snapshot."""

    def __init__(
        self,
        snapshot: dict,
        card_id: Optional[str] = None,
        secrets: Optional[dict] = None,
    ):
        self.snapshot = snapshot
        self.card_id = card_id
        self.secrets = dict(secrets or {})
        self.actions: list[dict] = []

    @classmethod
    def from_file(cls, path: Path, card_id: Optional[str] = None, secrets: Optional[dict] = None) -> "SnapshotHost":
        """Load a snapshot JSON file."""
        path = Path(path)
        if not path.exists():
            raise SnapshotError(f"Snapshot not found: {path}")
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict) or "board" not in data:
            raise SnapshotError(f"Snapshot has no board: {path}")
        return cls(data, card_id=card_id, secrets=secrets)

    def set_secret(self, scope: str, visibility: str, key: str, value: Optional[str]) -> None:
        self.secrets[(scope, visibility, key)] = value

    async def get_secret(self, scope: str, visibility: str, key: str) -> Optional[str]:
        return self.secrets.get((scope, visibility, key))

    async def card(self, fields: str = "all") -> dict:
        for entry in self.snapshot.get("cards", []):
            if entry.get("id") == self.card_id:
                return copy.deepcopy(entry)
        raise SnapshotError(f"Card not found in snapshot: {self.card_id}")

    async def board(self, fields: str = "all") -> dict:
        return copy.deepcopy(self.snapshot["board"])

    async def lists(self, fields: str = "all") -> list[dict]:
        return copy.deepcopy(self.snapshot.get("lists", []))

    async def cards(self, fields: str = "all") -> list[dict]:
        return copy.deepcopy(self.snapshot.get("cards", []))

    async def popup(
        self,
        title: str,
        url: Optional[str] = None,
        items: Optional[list[PopupItem]] = None,
        height: Optional[int] = None,
    ) -> dict:
        action = {"type": "popup", "title": title, "url": url, "items": items or [], "height": height}
        self.actions.append(action)
        return action

    async def notice(self, message: str, severity: str = "info") -> dict:
        action = {"type": "notice", "message": message, "severity": severity}
        self.actions.append(action)
        return action

    async def close_popup(self) -> Any:
        action = {"type": "close_popup"}
        self.actions.append(action)
        return action
