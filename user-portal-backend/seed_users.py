"""
Create the users table and insert a few demo accounts.

Run this from the backend root:

    (.venv) python seed_users.py

Existing data is left alone: seeding only happens on an empty table.
"""

from user_portal.core.config import settings
from user_portal.core.logging_config import setup_logging
from user_portal.db.init_db import init_db, seed_initial_data
from user_portal.db.session import get_db
from user_portal.repositories.user_repository import UserRepository
from user_portal.schemas.user import UserRead


def main() -> None:
    setup_logging(settings.log_level)

    print(f"[INFO] Using database {settings.database_url}")
    init_db()

    with get_db() as db:
        count_new = seed_initial_data(db)
        users = UserRepository.from_session(db).all()

        print(f"[INFO] Inserted {count_new} new users rows")
        for user in users:
            print(f"  {UserRead.model_validate(user).model_dump_json()}")
        print("[INFO] Done.")


if __name__ == "__main__":
    main()
