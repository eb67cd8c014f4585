import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from nba_api.stats.static import teams as nba_teams

from hoopstats.core.exceptions import StoreFailure
from hoopstats.models.team import Team

logger = logging.getLogger(__name__)


async def list_teams(db: AsyncSession):
    try:
        result = await db.execute(select(Team).order_by(Team.name))
    except SQLAlchemyError as e:
        logger.error(f"Error listing teams: {e}")
        raise StoreFailure(str(e)) from e
    return [t.to_dict() for t in result.scalars().all()]


async def load_teams(db: AsyncSession):
    # using the static dataset from the nba_api, no network call
    all_teams = nba_teams.get_teams()

    inserted = 0
    skipped = 0

    try:
        for t in all_teams:
            name = t["full_name"]

            # check if already exists
            existing = await db.get(Team, name)
            if existing:
                skipped += 1
                continue

            db.add(Team(name=name, city=t.get("city") or "", championships_won=0))
            inserted += 1

        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Error loading teams: {e}")
        raise StoreFailure(str(e)) from e

    logger.info(f"Teams loaded: {inserted} inserted, {skipped} skipped")
    return {"inserted": inserted, "skipped": skipped}
