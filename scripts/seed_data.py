#!/usr/bin/env python3
"""
Seed script: creates users, items, requests and bookings via the API (no direct DB).
Run: server must be running.
  python scripts/seed_data.py
  python scripts/seed_data.py --users 20 --items-per-user 5 --base-url http://localhost:9090
"""

import argparse
import random
from datetime import datetime, timedelta

import httpx

API_BASE = "http://localhost:9090"
USER_HEADER = "X-Sharer-User-Id"

ITEMS = [
    ("Drill", "Cordless power drill with two batteries"),
    ("Ladder", "Aluminium ladder, three metres"),
    ("Tent", "Two person camping tent"),
    ("Kayak", "Sit-on-top kayak with paddle"),
    ("Projector", "Full HD projector with HDMI cable"),
    ("Pressure washer", "Electric pressure washer for patios"),
    ("Sewing machine", "Basic sewing machine, works fine"),
    ("Camera tripod", "Lightweight tripod for travel"),
    ("Lawn mower", "Petrol lawn mower"),
    ("Snowboard", "All-mountain snowboard, 156 cm"),
]

REQUESTS = [
    "Need a tile cutter for the weekend",
    "Looking for a camping stove",
    "Anyone has a wheelbarrow?",
    "Need a bike rack for a car",
]


def random_item() -> dict:
    name, description = random.choice(ITEMS)
    return {"name": name, "description": description, "available": random.random() > 0.2}


def booking_window() -> dict:
    start = datetime.now() + timedelta(days=random.randint(1, 30), hours=random.randint(0, 23))
    end = start + timedelta(days=random.randint(1, 7))
    return {"start": start.isoformat(timespec="seconds"), "end": end.isoformat(timespec="seconds")}


def main():
    ap = argparse.ArgumentParser(description="Seed users, items and bookings via API")
    ap.add_argument("--users", type=int, default=10, help="Number of users to create")
    ap.add_argument("--items-per-user", type=int, default=3, help="Items per user")
    ap.add_argument("--bookings", type=int, default=20, help="Booking attempts")
    ap.add_argument("--base-url", default=API_BASE, help="Server base URL")
    args = ap.parse_args()

    user_ids = []
    items = []
    bookings = 0
    errors = []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        print(f"Creating {args.users} users...")
        for i in range(args.users):
            email = f"user{i+1}@example.com"
            r = client.post("/users", json={"name": f"User {i+1}", "email": email})
            if r.status_code == 200:
                user_ids.append(r.json()["id"])
            else:
                errors.append(f"User {email}: {r.status_code} {r.text[:80]}")

        print("Creating requests...")
        for description in REQUESTS:
            if not user_ids:
                break
            r = client.post(
                "/requests",
                json={"description": description},
                headers={USER_HEADER: str(random.choice(user_ids))},
            )
            if r.status_code != 200:
                errors.append(f"Request: {r.status_code} {r.text[:80]}")

        print(f"Creating ~{len(user_ids) * args.items_per_user} items...")
        for user_id in user_ids:
            for _ in range(args.items_per_user):
                r = client.post("/items", json=random_item(), headers={USER_HEADER: str(user_id)})
                if r.status_code == 200:
                    items.append(r.json())
                else:
                    errors.append(f"Item of {user_id}: {r.status_code}")

        print(f"Attempting {args.bookings} bookings...")
        for _ in range(args.bookings):
            if not items or len(user_ids) < 2:
                break
            item = random.choice(items)
            booker_id = random.choice([u for u in user_ids if u != item["ownerId"]])
            r = client.post(
                "/bookings",
                json={"itemId": item["id"], **booking_window()},
                headers={USER_HEADER: str(booker_id)},
            )
            if r.status_code != 200:
                # Unavailable items are expected to be refused
                errors.append(f"Booking of {item['id']}: {r.status_code} {r.text[:80]}")
                continue
            bookings += 1
            booking_id = r.json()["id"]
            if random.random() > 0.5:
                client.patch(
                    f"/bookings/{booking_id}",
                    params={"approved": str(random.random() > 0.3).lower()},
                    headers={USER_HEADER: str(item["ownerId"])},
                )

    print(f"\nDone. Users: {len(user_ids)}, Items: {len(items)}, Bookings: {bookings}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        if len(errors) > 15:
            print("  ... and", len(errors) - 15, "more")


if __name__ == "__main__":
    main()
