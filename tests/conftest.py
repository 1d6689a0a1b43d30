from typing import Any, Dict, List, Optional, Union

import pytest

from src.models.enums import SeasonTag
from src.models.lookup import LookupFailed, LookupResult, NameFound, NameNotFound
from src.models.team import TeamRecord
from src.storage.supabase_client import TeamStore


class FakeTeamStore(TeamStore):
    """In-memory store. Values may be a name, None (no row) or an exception to raise."""

    def __init__(
        self,
        names: Optional[Dict[int, Union[str, None, Exception]]] = None,
        teams: Optional[List[TeamRecord]] = None,
    ):
        self.names = names or {}
        self.teams = teams
        self.calls: List[tuple] = []

    async def fetch_team_name(
        self, team_number: int, season: SeasonTag
    ) -> LookupResult:
        self.calls.append((team_number, season))
        value = self.names.get(team_number)
        if isinstance(value, Exception):
            raise value
        if value:
            return NameFound(name=value)
        return NameNotFound()

    async def fetch_teams(self, season: SeasonTag) -> Optional[List[TeamRecord]]:
        self.calls.append(("teams", season))
        return self.teams


class FakeResponse:
    def __init__(self, data: Any):
        self.data = data


class FakeQuery:
    """Mimics the chained postgrest builder used by SupabaseTeamStore."""

    def __init__(self, client: "FakeSupabaseClient", table: str):
        self.client = client
        self.table = table
        self.ops: List[tuple] = []

    def select(self, *columns: str) -> "FakeQuery":
        self.ops.append(("select", columns))
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self.ops.append(("eq", column, value))
        return self

    def limit(self, size: int) -> "FakeQuery":
        self.ops.append(("limit", size))
        return self

    def order(self, column: str) -> "FakeQuery":
        self.ops.append(("order", column))
        return self

    async def execute(self) -> FakeResponse:
        self.client.queries.append(self)
        if self.client.error is not None:
            raise self.client.error
        return FakeResponse(self.client.data)


class FakeSupabaseClient:
    def __init__(self, data: Any = None, error: Optional[Exception] = None):
        self.data = data
        self.error = error
        self.queries: List[FakeQuery] = []

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)


@pytest.fixture
def sample_teams() -> List[TeamRecord]:
    return [
        TeamRecord(team_number=118, team_name="Robonauts"),
        TeamRecord(team_number=1114, team_name="Simbotics"),
        TeamRecord(team_number=11, team_name="Alpha"),
    ]


@pytest.fixture
def make_store():
    return FakeTeamStore


@pytest.fixture
def make_supabase_client():
    return FakeSupabaseClient
