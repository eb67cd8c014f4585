from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from hoopstats.api.schemas import PlayerIn, RowId
from hoopstats.core.exceptions import RosterError
from hoopstats.db import players as queries
from hoopstats.db.session import get_db

router = APIRouter()


# Get all players
@router.get("")
async def get_players(db: AsyncSession = Depends(get_db)):
    try:
        return {"data": await queries.list_players(db)}
    except RosterError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


# Add a new player, returns the assigned id
@router.post("/add")
async def add_player(payload: PlayerIn, db: AsyncSession = Depends(get_db)):
    try:
        player_id = await queries.create_player(db, **payload.model_dump())
    except RosterError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"id": player_id}


# Search by partial name and/or exact team
@router.get("/search2")
async def search_players(
    name: Optional[str] = None,
    team: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    try:
        return {"data": await queries.search_players(db, name=name, team=team)}
    except RosterError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


# Replace all fields of a player
@router.put("/{player_id}")
async def update_player(
    player_id: RowId, payload: PlayerIn, db: AsyncSession = Depends(get_db)
):
    try:
        updated = await queries.update_player(db, player_id, **payload.model_dump())
    except RosterError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"message": "Player updated successfully", "updatedPlayer": updated}


# Delete a player. Deleting a missing id is not an error, deletedID is then 0
@router.delete("/{player_id}")
async def delete_player(player_id: RowId, db: AsyncSession = Depends(get_db)):
    try:
        deleted = await queries.delete_player(db, player_id)
    except RosterError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"message": "Player deleted successfully", "deletedID": deleted}
