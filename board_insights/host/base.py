"""Host collaborator interface.

The host runtime owns board data, the per-user secret store and every piece
of UI. The insight actions only read from it and push results into its
presentation sinks.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional


@dataclass
class PopupItem:
    """A clickable line in a host popup."""

    text: str
    callback: Optional[Callable[["HostContext"], Awaitable[Any]]] = None


class HostContext(ABC):
    """Abstract view of the host runtime for one triggered action."""

    @abstractmethod
    async def get_secret(self, scope: str, visibility: str, key: str) -> Optional[str]:
        """Read a stored secret, or None if it is not set."""
        pass

    @abstractmethod
    async def card(self, fields: str = "all") -> dict:
        """The card the action was triggered from."""
        pass

    @abstractmethod
    async def board(self, fields: str = "all") -> dict:
        pass

    @abstractmethod
    async def lists(self, fields: str = "all") -> list[dict]:
        pass

    @abstractmethod
    async def cards(self, fields: str = "all") -> list[dict]:
        pass

    @abstractmethod
    async def popup(
        self,
        title: str,
        url: Optional[str] = None,
        items: Optional[list[PopupItem]] = None,
        height: Optional[int] = None,
    ) -> Any:
        """Show a popup with either a page ``url`` or a list of ``items``."""
        pass

    @abstractmethod
    async def notice(self, message: str, severity: str = "info") -> Any:
        """Show a transient notice."""
        pass

    @abstractmethod
    async def close_popup(self) -> Any:
        pass
