# Per-game box score lines
import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hoopstats.core.exceptions import StoreFailure, ValidationFailure
from hoopstats.models.game_stat import GameStat
from hoopstats.models.player import Player
from hoopstats.models.team import Team

logger = logging.getLogger(__name__)


async def _fetch_rows(db: AsyncSession, query):
    try:
        result = await db.execute(query.order_by(GameStat.game_id))
    except (SQLAlchemyError, OverflowError) as e:
        logger.error(f"Error fetching game stats: {e}")
        raise StoreFailure(str(e)) from e
    return [row.to_dict() for row in result.scalars().all()]


# every game stat with the owning player's name (None for orphaned rows)
async def list_game_stats(db: AsyncSession):
    query = (
        select(GameStat, Player.name.label("player_name"))
        .outerjoin(Player, Player.id == GameStat.player_id)
        .order_by(GameStat.game_id)
    )
    try:
        result = await db.execute(query)
    except (SQLAlchemyError, OverflowError) as e:
        logger.error(f"Error fetching game stats: {e}")
        raise StoreFailure(str(e)) from e

    return [
        {**stat.to_dict(), "player_name": player_name}
        for stat, player_name in result.all()
    ]


async def _check_references(db: AsyncSession, player_id, team_id):
    if player_id is None or await db.get(Player, player_id) is None:
        raise ValidationFailure(f"Player {player_id} does not exist")
    if team_id is None or await db.get(Team, team_id) is None:
        raise ValidationFailure(f"Team {team_id} does not exist")


async def create_game_stat(
    db: AsyncSession,
    player_id: int | None,
    team_id: str | None,
    points: int | None = None,
    rebounds: int | None = None,
    assists: int | None = None,
    minutes_played: int | None = None,
    enforce_references: bool = False,
) -> int:
    if enforce_references:
        await _check_references(db, player_id, team_id)

    stat = GameStat(
        player_id=player_id,
        team_id=team_id,
        points=points,
        rebounds=rebounds,
        assists=assists,
        minutes_played=minutes_played,
    )
    try:
        db.add(stat)
        await db.commit()
    except (SQLAlchemyError, OverflowError) as e:
        await db.rollback()
        logger.error(f"Error inserting game stat: {e}")
        raise StoreFailure(str(e)) from e

    logger.info(f"Game stat inserted with game_id: {stat.game_id}")
    return stat.game_id


async def _delete_where(db: AsyncSession, stmt, label: str) -> int:
    try:
        result = await db.execute(stmt)
        await db.commit()
    except (SQLAlchemyError, OverflowError) as e:
        await db.rollback()
        logger.error(f"Error deleting {label}: {e}")
        raise StoreFailure(str(e)) from e

    logger.info(f"Delete {label}: {result.rowcount} row(s) affected")
    return result.rowcount


async def delete_game_stat(db: AsyncSession, game_id: int) -> int:
    return await _delete_where(
        db, delete(GameStat).where(GameStat.game_id == game_id), f"game stat {game_id}"
    )


# irreversible, any confirmation belongs to the caller
async def delete_all_game_stats(db: AsyncSession) -> int:
    return await _delete_where(db, delete(GameStat), "all game stats")


async def game_stats_for_player(db: AsyncSession, player_id: int):
    return await _fetch_rows(
        db, select(GameStat).where(GameStat.player_id == player_id)
    )


async def game_stats_for_game(db: AsyncSession, game_id: int):
    return await _fetch_rows(db, select(GameStat).where(GameStat.game_id == game_id))
