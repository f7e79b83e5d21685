# init_db.py

import argparse

from app.db.session import Base, engine, SessionLocal
from app.db import models  # noqa: F401
from app.db.models.user import User
from app.db.create_dummy_data import seed_dummy_todos


def init(seed_email=None):
    print("Creating tables (if not exist)...")
    Base.metadata.create_all(bind=engine)

    if seed_email:
        db = SessionLocal()
        try:
            user = db.query(User).filter(User.email == seed_email.lower()).first()
            if user is None:
                print(f"[ERROR] - No user registered with email {seed_email}")
            else:
                seed_dummy_todos(db, user)
        finally:
            db.close()

    print("✅ Done.")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create tables and optionally seed dummy todos.")
    parser.add_argument("--seed", metavar="EMAIL", help="seed dummy todos for this registered user")
    args = parser.parse_args()
    init(args.seed)
