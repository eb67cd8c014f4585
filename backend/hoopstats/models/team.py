from sqlalchemy import Column, Integer, Text
from hoopstats.db.base import Base


class Team(Base):
    __tablename__ = "teams"

    name = Column(Text, primary_key=True)  # "Boston Celtics"
    city = Column(Text, nullable=False)  # "Boston"
    championships_won = Column(Integer, nullable=False, default=0, server_default="0")

    def to_dict(self):
        return {
            "name": self.name,
            "city": self.city,
            "championships_won": self.championships_won,
        }
