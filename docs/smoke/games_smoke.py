import os
import sys

import requests

# Base URL of a running games service (include GAMES_URL_PREFIX if one is set)
GAMES_URL = os.environ.get("GAMES_URL", "http://localhost:5000/games")


def check_games_lifecycle():
    """
    Creates, updates, lists and deletes one game against a live service.
    Expected: 201, 200, 200 (game listed), 204, then the game is gone.
    """
    print("\n" + "=" * 60)
    print("  SMOKE: Games create / update / delete")
    print("=" * 60)

    game = {"title": "Mario Bros.", "genre": "Platforming", "releaseDate": "September 1983"}

    print("\nStep 1: Creating game...")
    resp = requests.post(GAMES_URL, json=game, timeout=5)
    if resp.status_code != 201:
        print(f"FAILED: expected 201, got {resp.status_code}: {resp.text}")
        return False
    game_id = resp.json()["id"]
    print(f"OK: created game {game_id}")

    print("\nStep 2: Updating release date...")
    resp = requests.put(f"{GAMES_URL}/{game_id}", json={"title": game["title"], "releaseDate": "June 1983"}, timeout=5)
    if resp.status_code != 200 or resp.json().get("releaseDate") != "June 1983":
        print(f"FAILED: update returned {resp.status_code}: {resp.text}")
        return False
    print("OK: updated")

    print("\nStep 3: Listing games...")
    resp = requests.get(GAMES_URL, timeout=5)
    if resp.status_code != 200 or not any(g["id"] == game_id for g in resp.json()):
        print(f"FAILED: game {game_id} missing from list ({resp.status_code})")
        return False
    print(f"OK: {len(resp.json())} games listed")

    print("\nStep 4: Deleting game...")
    resp = requests.delete(f"{GAMES_URL}/{game_id}", timeout=5)
    if resp.status_code != 204:
        print(f"FAILED: expected 204, got {resp.status_code}: {resp.text}")
        return False

    resp = requests.get(GAMES_URL, timeout=5)
    if any(g["id"] == game_id for g in resp.json()):
        print(f"FAILED: game {game_id} still listed after delete")
        return False
    print("OK: deleted")
    return True


def check_validation_errors():
    """Missing id and missing title must both be rejected with 422."""
    print("\n" + "=" * 60)
    print("  SMOKE: Validation errors")
    print("=" * 60)

    resp = requests.delete(f"{GAMES_URL}/", timeout=5)
    if resp.status_code != 422 or resp.json() != {"message": "You need to give me an ID"}:
        print(f"FAILED: delete without id returned {resp.status_code}: {resp.text}")
        return False

    resp = requests.put(f"{GAMES_URL}/5b2d1983633f412f4d1d9368", json={"genre": "Puzzle"}, timeout=5)
    if resp.status_code != 422:
        print(f"FAILED: update without title returned {resp.status_code}: {resp.text}")
        return False

    resp = requests.post(GAMES_URL, json={"genre": "Puzzle"}, timeout=5)
    if resp.status_code != 422:
        print(f"FAILED: create without title returned {resp.status_code}: {resp.text}")
        return False

    print("OK: all rejected with 422")
    return True


if __name__ == "__main__":
    print(f"\nRunning smoke checks against {GAMES_URL}")

    try:
        passed = check_games_lifecycle() and check_validation_errors()
    except requests.RequestException as e:
        print(f"\nCould not reach the games service: {e}")
        passed = False

    print("\n" + "=" * 60)
    print("  ALL CHECKS PASSED" if passed else "  SOME CHECKS FAILED")
    print("=" * 60 + "\n")
    sys.exit(0 if passed else 1)
