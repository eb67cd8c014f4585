# Request bodies. Every field is optional here: presence of required
# fields is checked by the db layer, pydantic only checks types.
from typing import Annotated, Optional

from fastapi import Path
from pydantic import BaseModel, Field

# INTEGER columns are 64-bit signed
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

StoreInt = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]
RowId = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]


class PlayerIn(BaseModel):
    name: Optional[str] = None
    team: Optional[str] = None
    points_per_game: Optional[StoreInt] = None
    assists_per_game: Optional[StoreInt] = None
    rebounds_per_game: Optional[StoreInt] = None


class GameStatIn(BaseModel):
    # any game_id sent by the client is dropped, the store assigns it
    player_id: Optional[StoreInt] = None
    team_id: Optional[str] = None
    points: Optional[StoreInt] = None
    rebounds: Optional[StoreInt] = None
    assists: Optional[StoreInt] = None
    minutes_played: Optional[StoreInt] = None
