import sys
import asyncio

# --- Settings/Logging ---
from src.logging.setup import setup_logging
from src.config.settings import settings

setup_logging()

from loguru import logger

from src.directory.service import TeamDirectory
from src.models.enums import SeasonTag
from src.storage.supabase_client import initialize_team_store

from rich import print
from rich.panel import Panel
from rich.table import Table


async def main(query: str) -> None:
    """Loads the roster, ranks it against ``query`` and prints the hits with names."""
    season = SeasonTag.from_year(settings.default_season)
    logger.info(f"Starting team directory lookup for season {season.value}")

    store = await initialize_team_store(settings)
    directory = TeamDirectory(store, season)

    teams = await directory.load_teams()
    logger.info(f"Roster holds {len(teams)} teams.")

    hits = directory.search(query)
    if not hits:
        print(Panel(f"No teams match '{query}'.", title="Team search"))
        return

    numbers = [team.team_number for team in hits if team.team_number is not None]
    names = await directory.resolve_names(numbers)

    table = Table(title=f"Teams matching '{query}' ({season.route_slug})")
    table.add_column("Team", justify="right")
    table.add_column("Name")
    table.add_column("Location")
    for team in hits:
        name = names.get(team.team_number, team.display_name)
        table.add_row(team.number_label, name, team.location or "")
    print(table)


if __name__ == "__main__":
    try:
        asyncio.run(main(" ".join(sys.argv[1:])))
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
