# Teams are reference data: listed, and seeded from the nba_api static dataset
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from hoopstats.core.exceptions import RosterError
from hoopstats.db import teams as queries
from hoopstats.db.session import get_db

router = APIRouter()


# Get all teams (raw team rows)
@router.get("")
async def get_teams(db: AsyncSession = Depends(get_db)):
    try:
        return {"data": await queries.list_teams(db)}
    except RosterError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/load")
async def load_all_teams(db: AsyncSession = Depends(get_db)):
    """
    Load all NBA teams from nba_api static endpoints into DB.
    Teams already present are skipped.
    """
    try:
        counts = await queries.load_teams(db)
    except RosterError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {"message": "Teams loaded", **counts}
