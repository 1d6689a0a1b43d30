# src/storage/supabase_client.py
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from loguru import logger
from postgrest import APIResponse
from postgrest.exceptions import APIError
from pydantic import ValidationError
from supabase import AsyncClient, create_async_client

from src.config.settings import AppSettings
from src.models.enums import SeasonTag
from src.models.lookup import LookupFailed, LookupResult, NameFound, NameNotFound
from src.models.team import TeamRecord

NOT_CONFIGURED_REASON = "Supabase client not configured"


class TeamStore(ABC):
    """Read access to the remote team directory."""

    is_configured: bool = True

    @abstractmethod
    async def fetch_team_name(
        self, team_number: int, season: SeasonTag
    ) -> LookupResult:
        """Looks up the display name stored for ``team_number``."""

    @abstractmethod
    async def fetch_teams(self, season: SeasonTag) -> Optional[List[TeamRecord]]:
        """Returns the full roster, or None if it could not be loaded."""


class UnconfiguredTeamStore(TeamStore):
    """Stand-in used when no Supabase credentials are available."""

    is_configured = False

    async def fetch_team_name(
        self, team_number: int, season: SeasonTag
    ) -> LookupResult:
        return LookupFailed(reason=NOT_CONFIGURED_REASON)

    async def fetch_teams(self, season: SeasonTag) -> Optional[List[TeamRecord]]:
        logger.warning("Supabase not configured; no roster available.")
        return None


class SupabaseTeamStore(TeamStore):
    """Team directory backed by a Supabase table of teamNumber/teamName rows.

    Name lookups always read ``table``, which holds the current names only;
    ``season`` is accepted there but does not narrow the query. Full rosters
    come from the per-season table named by ``roster_table_template``.
    """

    def __init__(
        self,
        client: AsyncClient,
        table: str = "teams",
        roster_table_template: str = "season_{year}",
    ):
        self.client = client
        self.table = table
        self.roster_table_template = roster_table_template

    async def fetch_team_name(
        self, team_number: int, season: SeasonTag
    ) -> LookupResult:
        try:
            response: APIResponse = (
                await self.client.table(self.table)
                .select("teamName")
                .eq("teamNumber", team_number)
                .limit(1)
                .execute()
            )
        except APIError as e:
            logger.debug(f"Full APIError details: {e}")
            return LookupFailed(reason=f"Supabase API error: {e.message}")
        except Exception as e:
            return LookupFailed(reason=f"{type(e).__name__}: {e}")

        rows: List[Dict[str, Any]] = response.data or []
        if not rows:
            return NameNotFound()

        name = rows[0].get("teamName")
        if not isinstance(name, str):
            if name is not None:
                return LookupFailed(reason=f"Unexpected teamName value: {name!r}")
            return NameNotFound()
        if not name:
            return NameNotFound()
        return NameFound(name=name)

    def roster_table_for(self, season: SeasonTag) -> str:
        return self.roster_table_template.format(year=season.value)

    async def fetch_teams(self, season: SeasonTag) -> Optional[List[TeamRecord]]:
        roster_table = self.roster_table_for(season)
        logger.info(
            f"Fetching team roster for season {season.value} from {roster_table}..."
        )
        try:
            response: APIResponse = (
                await self.client.table(roster_table)
                .select("*")
                .order("teamNumber")
                .execute()
            )
        except APIError as e:
            logger.error(f"Supabase API error fetching teams: {e.message}")
            logger.debug(f"Full APIError details: {e}")
            return None
        except Exception as e:
            logger.error(f"An unexpected error occurred fetching teams: {e}")
            logger.exception("Traceback:")
            return None

        teams: List[TeamRecord] = []
        skipped = 0
        for row in response.data or []:
            try:
                teams.append(TeamRecord.model_validate(row))
            except ValidationError as e:
                skipped += 1
                logger.debug(f"Skipping malformed team row {row!r}: {e}")

        if skipped:
            logger.warning(f"Skipped {skipped} malformed team rows.")
        logger.success(f"Loaded {len(teams)} teams for season {season.value}.")
        return teams


async def initialize_team_store(app_settings: AppSettings) -> TeamStore:
    """Builds the team store from settings, falling back to the unconfigured variant."""
    if not app_settings.supabase_configured:
        logger.warning("Supabase URL or Key not configured; team names will use fallbacks.")
        return UnconfiguredTeamStore()

    logger.debug(
        f"Attempting to initialize Async Supabase client with URL: {app_settings.supabase_url}"
    )

    try:
        client: AsyncClient = await create_async_client(
            app_settings.supabase_url, app_settings.supabase_key
        )
    except Exception as e:
        logger.exception(f"Failed to initialize Async Supabase client: {e}")
        return UnconfiguredTeamStore()

    logger.success("Async Supabase client initialized successfully.")
    return SupabaseTeamStore(
        client,
        table=app_settings.teams_table,
        roster_table_template=app_settings.roster_table_template,
    )
