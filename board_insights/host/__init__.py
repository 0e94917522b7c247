"""Host runtime interface, capability table and snapshot-backed host."""

from board_insights.host.base import HostContext, PopupItem
from board_insights.host.power_up import Button, build_capabilities, register
from board_insights.host.snapshot import SnapshotError, SnapshotHost

__all__ = [
    "HostContext",
    "PopupItem",
    "Button",
    "build_capabilities",
    "register",
    "SnapshotError",
    "SnapshotHost",
]
