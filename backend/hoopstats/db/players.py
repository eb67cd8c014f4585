# Player create/read/update/delete and search
import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hoopstats.core.exceptions import NotFound, StoreFailure, ValidationFailure
from hoopstats.models.player import Player

logger = logging.getLogger(__name__)


def _is_blank(value) -> bool:
    return value is None or not str(value).strip()


async def list_players(db: AsyncSession):
    try:
        result = await db.execute(select(Player).order_by(Player.id))
    except (SQLAlchemyError, OverflowError) as e:
        logger.error(f"Error listing players: {e}")
        raise StoreFailure(str(e)) from e
    return [p.to_dict() for p in result.scalars().all()]


async def create_player(
    db: AsyncSession,
    name: str | None,
    team: str | None,
    points_per_game: int | None = None,
    assists_per_game: int | None = None,
    rebounds_per_game: int | None = None,
) -> int:
    if _is_blank(name):
        raise ValidationFailure("Player name is required")
    if _is_blank(team):
        raise ValidationFailure("Player team is required")

    player = Player(
        name=name,
        team=team,
        points_per_game=points_per_game,
        assists_per_game=assists_per_game,
        rebounds_per_game=rebounds_per_game,
    )
    try:
        db.add(player)
        await db.commit()
    except (SQLAlchemyError, OverflowError) as e:
        await db.rollback()
        logger.error(f"Error inserting player: {e}")
        raise StoreFailure(str(e)) from e

    logger.info(f"Player inserted successfully with ID: {player.id}")
    return player.id


async def update_player(
    db: AsyncSession,
    player_id: int,
    name: str | None,
    team: str | None,
    points_per_game: int | None = None,
    assists_per_game: int | None = None,
    rebounds_per_game: int | None = None,
):
    """
    Overwrite every mutable field of a player, including with None for the
    per-game stats. Not a merge: omitted stats are cleared.
    """
    try:
        player = await db.get(Player, player_id)
        if player is None:
            raise NotFound(f"Player {player_id} not found")
        if name is None or team is None:
            raise ValidationFailure("Player name and team cannot be null")

        player.name = name
        player.team = team
        player.points_per_game = points_per_game
        player.assists_per_game = assists_per_game
        player.rebounds_per_game = rebounds_per_game
        await db.commit()
    except (SQLAlchemyError, OverflowError) as e:
        await db.rollback()
        logger.error(f"Error updating player {player_id}: {e}")
        raise StoreFailure(str(e)) from e

    logger.info(f"Player {player_id} updated")
    return player.to_dict()


# returns the number of rows removed, 0 when nothing matched
async def delete_player(db: AsyncSession, player_id: int) -> int:
    try:
        result = await db.execute(delete(Player).where(Player.id == player_id))
        await db.commit()
    except (SQLAlchemyError, OverflowError) as e:
        await db.rollback()
        logger.error(f"Error deleting player {player_id}: {e}")
        raise StoreFailure(str(e)) from e

    logger.info(f"Delete player {player_id}: {result.rowcount} row(s) affected")
    return result.rowcount


async def search_players(
    db: AsyncSession,
    name: str | None = None,
    team: str | None = None,
):
    """
    Conjunctive filter on players. `name` is a case-insensitive substring
    match, `team` an exact match. Missing or empty filters match everything.
    """
    logger.info(f"Searching for players with name: {name} and team: {team}")

    query = select(Player)
    if name:
        query = query.where(Player.name.icontains(name, autoescape=True))
    if team:
        query = query.where(Player.team == team)

    try:
        result = await db.execute(query.order_by(Player.id))
    except (SQLAlchemyError, OverflowError) as e:
        logger.error(f"Error searching for players: {e}")
        raise StoreFailure(str(e)) from e
    return [p.to_dict() for p in result.scalars().all()]
