# src/directory/service.py
from typing import Dict, Iterable, List, Optional, Union

from loguru import logger

from src.directory.names import batch_resolve_team_names, resolve_team_name
from src.models.enums import SeasonTag
from src.models.team import TeamRecord
from src.search.ranking import rank_teams
from src.storage.supabase_client import TeamStore


class TeamDirectory:
    """Search and name lookup for one season, as used by a dashboard screen."""

    def __init__(self, store: TeamStore, season: Union[SeasonTag, int, None]):
        self.store = store
        self.season = SeasonTag.from_year(season)
        self._teams: Optional[List[TeamRecord]] = None

    @property
    def teams(self) -> Optional[List[TeamRecord]]:
        return self._teams

    async def load_teams(self) -> List[TeamRecord]:
        """Fetches the roster once; later calls reuse it."""
        if self._teams is not None:
            return self._teams

        teams = await self.store.fetch_teams(self.season)
        if teams is None:
            logger.warning(
                f"No roster loaded for season {self.season.value}; search will be empty."
            )
            return []

        self._teams = teams
        return teams

    def search(self, query: str) -> List[TeamRecord]:
        return rank_teams(self._teams, query)

    async def resolve_name(self, team_number: int) -> str:
        return await resolve_team_name(self.store, team_number, self.season)

    async def resolve_names(self, team_numbers: Iterable[int]) -> Dict[int, str]:
        return await batch_resolve_team_names(self.store, team_numbers, self.season)
