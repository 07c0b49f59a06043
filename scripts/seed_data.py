#!/usr/bin/env python3
"""
Seed script: creates hunters with weapons, trophies and public rooms via the API (no direct DB).
Tokens are signed locally with SECRET_KEY, the same way the identity provider signs them.
Run: API must be running.
  python scripts/seed_data.py
  python scripts/seed_data.py --users 20 --trophies-per-user 12
"""

import argparse
import random
import sys
from pathlib import Path

# Project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import httpx

from app.core.security import create_access_token

API_BASE = "http://localhost:8000/api"

SPECIES = [
    "Whitetail Deer", "Mule Deer", "Elk", "Moose", "Pronghorn", "Black Bear",
    "Kudu", "Impala", "Gemsbok", "Cape Buffalo", "Red Stag", "Chamois",
]
LOCATIONS = ["Wisconsin", "Montana", "Colorado", "Alberta", "Namibia", "South Africa", "New Zealand", "Austria"]
METHODS = ["Rifle", "Bow", "Muzzleloader"]
WEAPONS = [
    {"name": "Old Reliable", "type": "Rifle", "caliber": ".30-06", "make": "Winchester", "model": "Model 70"},
    {"name": "Backcountry Bow", "type": "Bow", "make": "Mathews", "model": "V3X"},
    {"name": "Smokepole", "type": "Muzzleloader", "caliber": ".50", "make": "CVA"},
    {"name": "Bird Gun", "type": "Shotgun", "caliber": "12 ga", "make": "Benelli"},
]
THEMES = ["lodge", "manor", "minimal"]


def random_trophy() -> dict:
    return {
        "species": random.choice(SPECIES),
        "name": f"Trophy {random.randint(1, 999)}",
        "date": f"20{random.randint(15, 25)}-{random.randint(1, 12):02d}-{random.randint(1, 28):02d}",
        "location": random.choice(LOCATIONS),
        "method": random.choice(METHODS),
        "score": random.choice(["", f"{random.randint(120, 210)} SCI", f"{random.randint(120, 190)} B&C", None]),
        "notes": random.choice([None, "Long stalk in the rain.", "Last light on the final day."]),
        "imageUrl": random.choice([None, "/uploads/sample/trophy.jpg"]),
        "featured": random.random() > 0.8,
    }


def main():
    ap = argparse.ArgumentParser(description="Seed hunters, weapons, trophies and ratings via API")
    ap.add_argument("--users", type=int, default=10, help="Number of hunters to create")
    ap.add_argument("--trophies-per-user", type=int, default=8, help="Trophies per hunter")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    hunters = []
    errors = []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        print(f"Creating {args.users} hunters...")
        for i in range(args.users):
            sub = f"seed-user-{i + 1}"
            token = create_access_token(
                sub,
                extra={"email": f"hunter{i + 1}@example.com", "first_name": "Hunter", "last_name": str(i + 1)},
            )
            headers = {"Authorization": f"Bearer {token}"}
            hunters.append((sub, headers))

            r = client.put("/preferences", headers=headers, json={
                "theme": random.choice(THEMES),
                "roomVisibility": "public" if random.random() > 0.3 else "private",
                "huntingLocations": random.sample(LOCATIONS, 2),
            })
            if r.status_code != 200:
                errors.append(f"Preferences {sub}: {r.status_code} {r.text[:80]}")
                continue

            weapon_ids = []
            for weapon in random.sample(WEAPONS, 2):
                r = client.post("/weapons", headers=headers, json=weapon)
                if r.status_code == 201:
                    weapon_ids.append(r.json()["id"])
                else:
                    errors.append(f"Weapon {sub}: {r.status_code}")

            for _ in range(args.trophies_per_user):
                trophy = random_trophy()
                if weapon_ids and random.random() > 0.5:
                    trophy["weaponId"] = random.choice(weapon_ids)
                r = client.post("/trophies", headers=headers, json=trophy)
                if r.status_code != 201:
                    errors.append(f"Trophy {sub}: {r.status_code} {r.text[:80]}")

        print("Rating rooms...")
        ratings = 0
        for rater, headers in hunters:
            for owner, _ in random.sample(hunters, min(3, len(hunters))):
                if owner == rater:
                    continue
                r = client.post("/community/rate", headers=headers, json={
                    "roomOwnerId": owner, "score": random.randint(1, 5),
                })
                if r.status_code == 200:
                    ratings += 1
                else:
                    errors.append(f"Rate {rater}->{owner}: {r.status_code}")

        rooms = client.get("/community/rooms").json()

    print(f"\nDone. Hunters: {len(hunters)}, ratings: {ratings}, public rooms: {len(rooms)}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        if len(errors) > 15:
            print("  ... and", len(errors) - 15, "more")


if __name__ == "__main__":
    main()
