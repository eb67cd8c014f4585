from sqlalchemy import Column, Integer, Text
from hoopstats.db.base import Base


class GameStat(Base):
    __tablename__ = "game_stats"

    game_id = Column(Integer, primary_key=True, autoincrement=True)

    # references players.id / teams.name by value only. Deleting a player
    # must neither cascade nor be blocked, so no FOREIGN KEY constraint.
    player_id = Column(Integer, index=True)
    team_id = Column(Text)

    points = Column(Integer)
    rebounds = Column(Integer)
    assists = Column(Integer)
    minutes_played = Column(Integer)

    def to_dict(self):
        return {
            "game_id": self.game_id,
            "player_id": self.player_id,
            "team_id": self.team_id,
            "points": self.points,
            "rebounds": self.rebounds,
            "assists": self.assists,
            "minutes_played": self.minutes_played,
        }
