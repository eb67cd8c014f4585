from sqlalchemy import Column, Integer, Text
from hoopstats.db.base import Base


class Player(Base):
    __tablename__ = "players"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    team = Column(Text, nullable=False)  # team name, not enforced against teams

    points_per_game = Column(Integer)
    assists_per_game = Column(Integer)
    rebounds_per_game = Column(Integer)

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "team": self.team,
            "points_per_game": self.points_per_game,
            "assists_per_game": self.assists_per_game,
            "rebounds_per_game": self.rebounds_per_game,
        }
