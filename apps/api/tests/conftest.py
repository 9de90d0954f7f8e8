from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from smart_ping.main import create_app
from smart_ping.services import summary as summary_module
from smart_ping.services import updates as updates_module


class FakeUpdateStore:
    """In-memory stand-in for smart_ping.db.updates with the same call surface."""

    def __init__(self):
        self.docs: Dict[ObjectId, Dict[str, Any]] = {}
        self.now: Optional[datetime] = None

    def _matches(self, doc, keyword, since) -> bool:
        if keyword:
            needle = keyword.lower()
            if not any(needle in doc[f].lower() for f in ("user", "title", "content")):
                return False
        if since is not None and doc["timestamp"] < since:
            return False
        return True

    def add(self, user: str, title: str, content: str, timestamp: datetime) -> Dict[str, Any]:
        doc = {"_id": ObjectId(), "user": user, "title": title, "content": content, "timestamp": timestamp}
        self.docs[doc["_id"]] = doc
        return dict(doc)

    async def insert_update(self, user: str, title: str, content: str) -> Dict[str, Any]:
        return self.add(user, title, content, self.now or datetime.utcnow())

    async def find_update(self, oid: ObjectId):
        doc = self.docs.get(oid)
        return dict(doc) if doc else None

    async def find_updates(self, keyword=None, since=None, skip=0, limit=None) -> List[Dict[str, Any]]:
        rows = [d for d in self.docs.values() if self._matches(d, keyword, since)]
        rows.sort(key=lambda d: (d["timestamp"], d["_id"]), reverse=True)
        rows = rows[skip:]
        if limit:
            rows = rows[:limit]
        return [dict(d) for d in rows]

    async def count_updates(self, keyword=None) -> int:
        return sum(1 for d in self.docs.values() if self._matches(d, keyword, None))

    async def replace_update(self, oid: ObjectId, fields: Dict[str, str]):
        doc = self.docs.get(oid)
        if doc is None:
            return None
        doc.update({k: fields[k] for k in ("user", "title", "content")})
        return dict(doc)

    async def remove_update(self, oid: ObjectId) -> bool:
        return self.docs.pop(oid, None) is not None


class StubLLM:
    def __init__(self, answer: str = "Team shipped things."):
        self.answer = answer
        self.prompts: List[str] = []

    async def complete(self, prompt: str, model: Optional[str] = None) -> str:
        self.prompts.append(prompt)
        return self.answer

    async def ping(self) -> bool:
        return True


@pytest.fixture
def fake_store(monkeypatch):
    store = FakeUpdateStore()
    monkeypatch.setattr(updates_module, "store", store)
    monkeypatch.setattr(summary_module, "store", store)
    return store


@pytest.fixture
def stub_llm():
    return StubLLM()


@pytest.fixture
def client(fake_store, stub_llm):
    # no `with`: startup hooks (index creation, real LLM client) stay off
    app = create_app()
    app.state.llm = stub_llm
    return TestClient(app)
