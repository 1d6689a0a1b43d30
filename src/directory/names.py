# src/directory/names.py
import asyncio
from typing import Dict, Iterable, List, Union

from loguru import logger

from src.models.enums import SeasonTag
from src.models.lookup import LookupFailed, NameFound, NameNotFound
from src.models.team import fallback_team_name
from src.storage.supabase_client import TeamStore


async def resolve_team_name(
    store: TeamStore, team_number: int, season: Union[SeasonTag, int, None]
) -> str:
    """Returns the display name for a team, or its fallback name.

    Never raises: an unconfigured store, a missing row and a failed query all
    end in ``fallback_team_name(team_number)``.
    A missing or unknown season is read as the latest one.
    """
    season = SeasonTag.from_year(season)

    if not store.is_configured:
        logger.warning(
            f"Supabase not configured, using fallback name for team {team_number}"
        )
        return fallback_team_name(team_number)

    try:
        result = await store.fetch_team_name(team_number, season)
    except Exception as e:
        logger.warning(f"Could not fetch team name for team {team_number}: {e}")
        return fallback_team_name(team_number)

    if isinstance(result, NameFound):
        return result.name
    if isinstance(result, NameNotFound):
        logger.info(
            f"No name on record for team {team_number} (season {season.value})"
        )
        return fallback_team_name(team_number)
    if isinstance(result, LookupFailed):
        logger.warning(
            f"Could not fetch team name for team {team_number}: {result.reason}"
        )
        return fallback_team_name(team_number)

    logger.warning(f"Unexpected lookup result for team {team_number}: {result!r}")
    return fallback_team_name(team_number)


async def batch_resolve_team_names(
    store: TeamStore, team_numbers: Iterable[int], season: Union[SeasonTag, int, None]
) -> Dict[int, str]:
    """Resolves every distinct team number concurrently.

    Returns a mapping with exactly one entry per distinct input number. A
    failure for one team only affects that team's entry.
    """
    season = SeasonTag.from_year(season)
    unique_teams: List[int] = list(dict.fromkeys(team_numbers))
    if not unique_teams:
        return {}

    logger.debug(
        f"Resolving {len(unique_teams)} team names for season {season.value}"
    )

    async def resolve_one(team_number: int) -> str:
        try:
            return await resolve_team_name(store, team_number, season)
        except Exception as e:
            logger.warning(f"Name resolution crashed for team {team_number}: {e}")
            return fallback_team_name(team_number)

    async with asyncio.TaskGroup() as group:
        tasks = {
            team_number: group.create_task(resolve_one(team_number))
            for team_number in unique_teams
        }

    return {team_number: task.result() for team_number, task in tasks.items()}
