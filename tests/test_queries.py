"""Tests for the query/command layer, without going through HTTP."""

import pytest

from hoopstats.core.exceptions import NotFound, StoreFailure, ValidationFailure
from hoopstats.db import game_stats, players, teams
from hoopstats.db.base import Base


class TestPlayerQueries:
    async def test_create_returns_new_id(self, test_session):
        first = await players.create_player(test_session, "LeBron James", "Los Angeles Lakers", 25, 8, 7)
        second = await players.create_player(test_session, "Luka Doncic", "Dallas Mavericks")

        assert second > first
        rows = await players.list_players(test_session)
        assert [r["id"] for r in rows] == [first, second]

    @pytest.mark.parametrize(
        "name,team",
        [(None, "Miami Heat"), ("", "Miami Heat"), ("Bam Adebayo", None), ("Bam Adebayo", " ")],
    )
    async def test_create_requires_name_and_team(self, test_session, name, team):
        with pytest.raises(ValidationFailure):
            await players.create_player(test_session, name, team)

        assert await players.list_players(test_session) == []

    async def test_update_missing_raises_not_found(self, test_session):
        with pytest.raises(NotFound):
            await players.update_player(test_session, 12, "Nobody", "Utah Jazz")

        assert await players.list_players(test_session) == []

    async def test_update_replaces_fields(self, test_session):
        player_id = await players.create_player(test_session, "Kyrie Irving", "Boston Celtics", 27, 6, 5)

        updated = await players.update_player(
            test_session, player_id, "Kyrie Irving", "Dallas Mavericks", 25, None, 5
        )

        assert updated["team"] == "Dallas Mavericks"
        assert updated["assists_per_game"] is None
        assert (await players.list_players(test_session)) == [updated]

    async def test_delete_reports_rows_affected(self, test_session):
        player_id = await players.create_player(test_session, "Kevin Durant", "Phoenix Suns")

        assert await players.delete_player(test_session, player_id) == 1
        assert await players.delete_player(test_session, player_id) == 0

    async def test_search(self, test_session):
        await players.create_player(test_session, "LeBron James", "Los Angeles Lakers")
        await players.create_player(test_session, "Luka Doncic", "Dallas Mavericks")
        await players.create_player(test_session, "James Harden", "Los Angeles Clippers")

        by_name = await players.search_players(test_session, name="jam")
        by_team = await players.search_players(test_session, team="Los Angeles Lakers")
        both = await players.search_players(test_session, name="james", team="Los Angeles Clippers")

        assert [p["name"] for p in by_name] == ["LeBron James", "James Harden"]
        assert [p["name"] for p in by_team] == ["LeBron James"]
        assert [p["name"] for p in both] == ["James Harden"]


class TestGameStatQueries:
    async def test_create_and_filter(self, test_session):
        first = await game_stats.create_game_stat(test_session, 1, "Miami Heat", 20, 10, 3, 34)
        second = await game_stats.create_game_stat(test_session, 2, "Utah Jazz", 12, 4, 9, 30)

        assert second > first
        for_player = await game_stats.game_stats_for_player(test_session, 2)
        assert [r["game_id"] for r in for_player] == [second]
        for_game = await game_stats.game_stats_for_game(test_session, first)
        assert for_game[0]["points"] == 20

    async def test_listing_includes_orphans(self, test_session):
        player_id = await players.create_player(test_session, "Bam Adebayo", "Miami Heat")
        await game_stats.create_game_stat(test_session, player_id, "Miami Heat", 20, 10, 3, 34)
        await game_stats.create_game_stat(test_session, 999, "Miami Heat", 2, 1, 0, 5)

        rows = await game_stats.list_game_stats(test_session)

        assert [r["player_name"] for r in rows] == ["Bam Adebayo", None]

    async def test_enforced_references(self, test_session):
        with pytest.raises(ValidationFailure):
            await game_stats.create_game_stat(
                test_session, 1, "Miami Heat", 20, 10, 3, 34, enforce_references=True
            )

        await teams.load_teams(test_session)
        player_id = await players.create_player(test_session, "Bam Adebayo", "Miami Heat")
        game_id = await game_stats.create_game_stat(
            test_session, player_id, "Miami Heat", 20, 10, 3, 34, enforce_references=True
        )

        assert game_id == 1

    async def test_delete_all_reports_rows(self, test_session):
        for points in (10, 20, 30):
            await game_stats.create_game_stat(test_session, 1, "Miami Heat", points)

        assert await game_stats.delete_all_game_stats(test_session) == 3
        assert await game_stats.list_game_stats(test_session) == []


class TestStoreFailure:
    async def test_missing_table_surfaces_as_store_failure(self, test_app, test_session):
        async with test_app.state.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

        with pytest.raises(StoreFailure):
            await players.list_players(test_session)

    async def test_store_failure_is_a_400(self, test_app, client):
        async with test_app.state.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

        response = await client.post("/players/add", json={"name": "X", "team": "Y"})

        assert response.status_code == 400
        assert "players" in response.json()["error"]

    async def test_integer_overflow_surfaces_as_store_failure(self, test_session):
        with pytest.raises(StoreFailure):
            await players.create_player(test_session, "Too Many", "Utah Jazz", 2**70)
        with pytest.raises(StoreFailure):
            await game_stats.game_stats_for_player(test_session, 2**70)

        assert await players.list_players(test_session) == []
