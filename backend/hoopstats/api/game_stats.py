from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from hoopstats.api.schemas import GameStatIn, RowId
from hoopstats.core.exceptions import RosterError
from hoopstats.db import game_stats as queries
from hoopstats.db.session import get_db

router = APIRouter()


# Get all game stats, joined with the player's name
@router.get("")
async def get_game_stats(db: AsyncSession = Depends(get_db)):
    try:
        return {"data": await queries.list_game_stats(db)}
    except RosterError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/add")
async def add_game_stat(
    payload: GameStatIn, request: Request, db: AsyncSession = Depends(get_db)
):
    enforce = request.app.state.settings.ENFORCE_GAMESTAT_REFERENCES
    try:
        game_id = await queries.create_game_stat(
            db, **payload.model_dump(), enforce_references=enforce
        )
    except RosterError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"message": "Game stats added successfully", "id": game_id}


@router.post("/deleteAll")
async def delete_all_game_stats(db: AsyncSession = Depends(get_db)):
    try:
        await queries.delete_all_game_stats(db)
    except RosterError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"message": "All game stats deleted successfully"}


# Get game stats by player
@router.get("/player/{player_id}")
async def get_game_stats_by_player(player_id: RowId, db: AsyncSession = Depends(get_db)):
    try:
        return {"data": await queries.game_stats_for_player(db, player_id)}
    except RosterError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


# Get game stats by game
@router.get("/game/{game_id}")
async def get_game_stats_by_game(game_id: RowId, db: AsyncSession = Depends(get_db)):
    try:
        return {"data": await queries.game_stats_for_game(db, game_id)}
    except RosterError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("/{game_id}")
async def delete_game_stat(game_id: RowId, db: AsyncSession = Depends(get_db)):
    try:
        deleted = await queries.delete_game_stat(db, game_id)
    except RosterError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"message": "Game stat deleted successfully", "deletedID": deleted}
