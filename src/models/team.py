# src/models/team.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


def fallback_team_name(team_number: int) -> str:
    """Placeholder shown wherever a real team name is unavailable."""
    return f"Team {team_number}"


class TeamRecord(BaseModel):
    """One team's season data as held by the dashboard.

    Only ``team_number`` and ``team_name`` matter to the directory; the rest
    rides along for the screens that render the rows.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    team_number: Optional[int] = Field(None, alias="teamNumber")
    team_name: Optional[str] = Field(None, alias="teamName")
    location: Optional[str] = None
    founded: Optional[str] = None
    website: Optional[str] = None
    sponsors: Optional[str] = None
    overall_rank: Optional[int] = Field(None, alias="overallRank")
    overall_opr: Optional[float] = Field(None, alias="overallOPR")
    events: List[str] = []

    @property
    def display_name(self) -> str:
        if self.team_name:
            return self.team_name
        if self.team_number is not None:
            return fallback_team_name(self.team_number)
        return "Unknown team"

    @property
    def number_label(self) -> str:
        """Team number for table cells; team 0 is a real team."""
        return "-" if self.team_number is None else str(self.team_number)
