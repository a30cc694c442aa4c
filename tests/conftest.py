"""
Shared test fixtures.

Stores are built over an in-memory backend with seeding disabled and a
controllable clock so timestamps are deterministic.
"""

import pytest

from hashnotes.config import Config, NotesConfig
from hashnotes.core.storage import MemoryBackend, NotesStorage
from hashnotes.models import Note
from hashnotes.services import NoteStore


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int = 1) -> int:
        self.now += ms
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def config() -> Config:
    """Configuration with seeding disabled."""
    return Config(notes=NotesConfig(seed_on_empty=False))


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def storage(backend) -> NotesStorage:
    return NotesStorage(backend)


@pytest.fixture
def store(storage, config, clock) -> NoteStore:
    """Loaded, empty note store."""
    note_store = NoteStore(storage=storage, config=config, clock=clock)
    note_store.load_notes()
    return note_store


@pytest.fixture
def note_a() -> Note:
    return Note(
        id="a",
        title="ISM Guide",
        content="talks about #Blueprints",
        hashtags=["#Blueprints"],
        pinned=True,
        created_at=50,
        updated_at=100,
    )


@pytest.fixture
def note_b() -> Note:
    return Note(
        id="b",
        title="Widget",
        content="no tags here",
        hashtags=[],
        pinned=False,
        created_at=150,
        updated_at=200,
    )


@pytest.fixture
def scenario_store(store, note_a, note_b) -> NoteStore:
    """Store holding the two reference notes a (pinned, #Blueprints) and b."""
    store.import_notes([note_a, note_b])
    return store


@pytest.fixture
def make_note():
    """Factory building notes with sensible defaults for ordering tests."""

    def _make(note_id: str, **fields) -> Note:
        defaults = {
            "title": f"Note {note_id}",
            "content": "",
            "created_at": 0,
            "updated_at": 0,
        }
        return Note(id=note_id, **{**defaults, **fields})

    return _make
