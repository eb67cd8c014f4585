import json
from pathlib import Path

import httpx


def prompt(text: str, default: str | None = None) -> str:
    hint = f" [{default}]" if default is not None else ""
    value = input(f"{text}{hint}: ").strip()
    return value or (default or "")


def prompt_yes_no(text: str, default: bool = False) -> bool:
    suffix = "Y/n" if default else "y/N"
    value = input(f"{text} ({suffix}): ").strip().lower()
    if not value:
        return default
    return value in {"y", "yes"}


def call_api(
    client: httpx.Client,
    method: str,
    path: str,
    params: dict | None = None,
    json_body: dict | None = None,
):
    print(f"-> {method} {path} {params or ''}".strip())
    response = client.request(method, path, params=params, json=json_body, timeout=60)
    response.raise_for_status()
    data = response.json()
    print(f"   done: {data}")
    return data


def load_players_file(path: str) -> list[dict]:
    players = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(players, list):
        raise SystemExit("Players file must contain a JSON list of player objects.")
    return players


def seed(client: httpx.Client, load_teams: bool, players: list[dict]) -> list[int]:
    if load_teams:
        print("Loading NBA teams...")
        call_api(client, "POST", "/teams/load")
    else:
        print("Skipping team load.")

    created = []
    for player in players:
        created.append(call_api(client, "POST", "/players/add", json_body=player)["id"])
    return created


def main():
    print("NBA roster seeding")
    base_url = prompt("API base URL", "http://127.0.0.1:8000")
    load_teams = prompt_yes_no("Load the 30 NBA teams", True)
    players_path = prompt("Players JSON file (empty to skip)", "")

    players = load_players_file(players_path) if players_path else []

    with httpx.Client(base_url=base_url) as client:
        created = seed(client, load_teams, players)

    print(f"Seeding complete, {len(created)} player(s) added.")


if __name__ == "__main__":
    main()
