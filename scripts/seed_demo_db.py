#!/usr/bin/env python3
"""
Seed a local SQLite database with demo data for ClarityNOW development.
Usage (from the repository root):
    python scripts/seed_demo_db.py [path/to/claritynow.db]
Creates: data/claritynow.db
"""
import json
import random
import sqlite3
import sys
from datetime import datetime, timedelta
from pathlib import Path

DB_PATH = Path(__file__).parent.parent / "data" / "claritynow.db"

DDL = [
    """
    CREATE TABLE IF NOT EXISTS portal_data (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        units_active INTEGER NOT NULL DEFAULT 0,
        units_pending INTEGER NOT NULL DEFAULT 0,
        units_closed INTEGER NOT NULL DEFAULT 0,
        gci_active INTEGER NOT NULL DEFAULT 0,
        gci_pending INTEGER NOT NULL DEFAULT 0,
        gci_closed INTEGER NOT NULL DEFAULT 0,
        volume_active INTEGER NOT NULL DEFAULT 0,
        volume_pending INTEGER NOT NULL DEFAULT 0,
        volume_closed INTEGER NOT NULL DEFAULT 0,
        profits_current_month INTEGER NOT NULL DEFAULT 0,
        profits_next_month INTEGER NOT NULL DEFAULT 0,
        profits_total INTEGER NOT NULL DEFAULT 0,
        monthly_profits TEXT NOT NULL DEFAULT '[]',
        profit_goals TEXT NOT NULL DEFAULT '[]',
        ratings TEXT NOT NULL DEFAULT '[]',
        updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP
    )""",
    """
    CREATE TABLE IF NOT EXISTS listings (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        status TEXT NOT NULL CHECK(status IN ('Active', 'Pending', 'Sold')) DEFAULT 'Active',
        transaction_type TEXT NOT NULL DEFAULT 'Resale',
        primary_agent TEXT NOT NULL,
        address TEXT NOT NULL,
        unit_goal TEXT NOT NULL DEFAULT 'No',
        contingent_sale TEXT NOT NULL DEFAULT 'No',
        signed_listing_date TEXT NOT NULL,
        active_listing_date TEXT NOT NULL,
        target_mls_date TEXT NOT NULL,
        date_on_market TEXT NOT NULL,
        expiration_date TEXT NOT NULL,
        listing_price INTEGER NOT NULL DEFAULT 0,
        gross_commission INTEGER NOT NULL DEFAULT 0,
        team TEXT NOT NULL DEFAULT '',
        gross_profit INTEGER NOT NULL DEFAULT 0,
        updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,
        created_at DATETIME DEFAULT CURRENT_TIMESTAMP
    )""",
]

AGENTS   = ['Bob', 'Alice', 'Carlos', 'Dana', 'Evan']
TEAMS    = ['CDS DESIGN', 'North Austin', 'Lakeway Group']
STATUSES = ['Active', 'Pending', 'Sold']
STREETS  = ['ONONDGA Dr', 'Burnet Rd', 'Lamar Blvd', 'Shoal Creek Blvd', 'Duval St']
TX_TYPES = ['Resale', 'New Construction', 'Lease']


def _fmt(d: datetime) -> str:
    return d.strftime("%m/%d/%Y")


def seed(db_path: Path = DB_PATH, listing_count: int = 60):
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path)
    cur  = conn.cursor()

    for stmt in DDL:
        cur.execute(stmt)

    if cur.execute("SELECT COUNT(*) FROM portal_data").fetchone()[0] == 0:
        cur.execute(
            """INSERT INTO portal_data(
                   units_active, units_pending, units_closed,
                   gci_active, gci_pending, gci_closed,
                   volume_active, volume_pending, volume_closed,
                   profits_current_month, profits_next_month, profits_total,
                   monthly_profits, profit_goals, ratings
               ) VALUES (?,?,?,?,?,?,?,?,?,?,?,?,?,?,?)""",
            (1, 2, 47,
             900, 1500, 282000,
             600000, 800000, 19740000,
             0, 0, 0,
             json.dumps([15000, 18000, 22000, 25000, 28000, 32000, 28000, 24000, 20000, 18000, 15000, 12000]),
             json.dumps([18800, 18800, 18800, 28200, 28200, 28200, 28200, 28200, 28200, 18800, 18800, 18800]),
             json.dumps([1, 0, 0, 0, 0, 0])),
        )

    if cur.execute("SELECT COUNT(*) FROM listings").fetchone()[0] == 0:
        for i in range(listing_count):
            signed = datetime.now() - timedelta(days=random.randint(5, 200))
            active = signed + timedelta(days=1)
            expiry = active + timedelta(days=90)
            price  = random.randrange(250_000, 1_500_000, 5_000)
            commission = round(price * 0.015)
            cur.execute(
                """INSERT INTO listings(
                       status, transaction_type, primary_agent, address,
                       unit_goal, contingent_sale, signed_listing_date, active_listing_date,
                       target_mls_date, date_on_market, expiration_date,
                       listing_price, gross_commission, team, gross_profit
                   ) VALUES (?,?,?,?,?,?,?,?,?,?,?,?,?,?,?)""",
                (random.choice(STATUSES), random.choice(TX_TYPES), random.choice(AGENTS),
                 f"{random.randint(100, 9999)} {random.choice(STREETS)} Austin, TX 787{random.randint(10, 59)}",
                 random.choice(['Yes', 'No']), random.choice(['Yes', 'No']),
                 _fmt(signed), _fmt(active), _fmt(expiry), _fmt(active), _fmt(expiry),
                 price, commission, random.choice(TEAMS),
                 commission - random.randint(1_000, 12_000)),
            )

    conn.commit()
    conn.close()
    print(f"Demo database seeded: {db_path}")
    print("   Tables: portal_data, listings")


if __name__ == "__main__":
    seed(Path(sys.argv[1]) if len(sys.argv) > 1 else DB_PATH)
