"""Shared test helpers."""

import pytest

from board_insights.config import SECRET_KEY, SECRET_SCOPE, SECRET_VISIBILITY


@pytest.fixture
def anyio_backend():
    return "asyncio"


SAMPLE_SNAPSHOT = {
    "board": {"id": "b1", "name": "Launch Plan"},
    "lists": [
        {"id": "l-todo", "name": "To Do"},
        {"id": "l-doing", "name": "Doing"},
        {"id": "l-done", "name": "Done"},
    ],
    "cards": [
        {
            "id": "c1",
            "name": "Write launch blog post",
            "desc": "Draft, review and publish the announcement post.",
            "idList": "l-todo",
            "idMembers": ["m1", "m2"],
            "checklists": [{"id": "cl1", "name": "Steps", "checkItems": [{"id": "i1"}, {"id": "i2"}]}],
            "due": "2020-01-01T12:00:00.000Z",
            "closed": False,
        },
        {
            "id": "c2",
            "name": "Ship release",
            "idList": "l-done",
            "closed": True,
        },
    ],
}


def make_host(card_id="c1", api_key="test-key", snapshot=None):
    """SnapshotHost over the sample board with the API key stored (or not)."""
    import copy
    from board_insights.host.snapshot import SnapshotHost

    host = SnapshotHost(copy.deepcopy(snapshot or SAMPLE_SNAPSHOT), card_id=card_id)
    if api_key is not None:
        host.set_secret(SECRET_SCOPE, SECRET_VISIBILITY, SECRET_KEY, api_key)
    return host


class MockProvider:
    """Mock LLM provider for testing."""

    def __init__(self, response="ok", error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.closed = False

    @property
    def name(self):
        return "mock"

    async def complete(self, prompt, max_tokens=1000):
        self.calls.append((prompt, max_tokens))
        if self.error is not None:
            raise self.error
        return self.response

    async def aclose(self):
        self.closed = True
