#!/usr/bin/env python3
"""
Seed script: creates sellers, pickup locations and furniture listings via the API (no direct DB).
Run: API must be running.
  python scripts/seed_data.py
  python scripts/seed_data.py --users 10 --items-per-user 15 --base-url http://localhost:3000
"""

import argparse
import random

import httpx

API_BASE = "http://localhost:3000"

TITLES = [
    "Oak dining table", "IKEA Poang chair", "Leather sofa", "Bookshelf", "Bed frame (queen)",
    "Office desk", "Ergonomic chair", "Coffee table", "Nightstand", "Dresser",
    "TV stand", "Bar stools (pair)", "Wardrobe", "Futon", "Shoe rack",
    "Kitchen cart", "Vanity mirror", "Floor lamp", "Side table", "Armchair",
]

DESCRIPTIONS = [
    "Solid wood, minor scratches on one leg.",
    "Like new, moving out sale.",
    "Needs two people to carry.",
    "Disassembled for easy pickup, all screws included.",
    "Pet-free, smoke-free home.",
    "Some wear on the fabric, otherwise sturdy.",
    "",
]

LOCATIONS = ["North campus", "Downtown depot", "East dorms", "Library lot", "Main street storage"]


def random_price() -> float:
    return random.choice([0, 5, 10, 15, 25, 40, 60, 80, 120, 200])


def random_item(location_ids: list[str]) -> dict:
    price = random_price()
    item = {
        "title": random.choice(TITLES),
        "description": random.choice(DESCRIPTIONS),
        "price": price,
        "retail": price * random.choice([2, 3, 4]) or None,
        "available": random.random() > 0.1,
    }
    if location_ids:
        item["locationId"] = random.choice(location_ids)
    return item


def main():
    ap = argparse.ArgumentParser(description="Seed sellers, locations and items via API")
    ap.add_argument("--users", type=int, default=5, help="Number of sellers to create")
    ap.add_argument("--items-per-user", type=int, default=10, help="Items per seller")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    sellers = []
    location_ids: list[str] = []
    created_items = 0
    errors = []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        # 1) Register sellers (400 "User already exists" means a previous run; reuse creds)
        print(f"Registering {args.users} sellers...")
        for i in range(args.users):
            creds = {"email": f"seller{i+1}@example.com", "password": "password123"}
            try:
                r = client.post("/auth/register", json={**creds, "name": f"Seller {i+1}"})
                if r.status_code == 201 or r.json().get("error") == "User already exists":
                    sellers.append(creds)
                else:
                    errors.append(f"Register {creds['email']}: {r.status_code} {r.text[:80]}")
            except httpx.HTTPError as e:
                errors.append(f"Register {creds['email']}: {e}")

        # 2) Log in each seller; the first one also creates the pickup locations
        for n, creds in enumerate(sellers):
            try:
                r = client.post("/auth/login", json=creds)
                if r.status_code != 200:
                    errors.append(f"Login {creds['email']}: {r.status_code}")
                    continue
                headers = {"Authorization": f"Bearer {r.json()['token']}"}

                if n == 0:
                    for name in LOCATIONS:
                        r = client.post("/api/locations", headers=headers, json={"name": name})
                        if r.status_code == 201:
                            location_ids.append(r.json()["id"])
                        else:
                            errors.append(f"Location {name}: {r.status_code}")
                    print(f"  {len(location_ids)} locations")

                for _ in range(args.items_per_user):
                    r = client.post("/api/items", headers=headers, json=random_item(location_ids))
                    if r.status_code == 201:
                        created_items += 1
                    else:
                        errors.append(f"Item {creds['email']}: {r.status_code}")
            except httpx.HTTPError as e:
                errors.append(f"Seller {creds['email']}: {e}")
            print(f"  Seller {creds['email']}: total items so far {created_items}")

        total = client.get("/api/totalNumber").json().get("totalNumber")

    print(f"\nDone. Sellers: {len(sellers)}, Items created: {created_items}, Items in store: {total}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        if len(errors) > 15:
            print("  ... and", len(errors) - 15, "more")


if __name__ == "__main__":
    main()
