#!/usr/bin/env python3
"""Insert the built-in global meme templates (safe to re-run)"""

import sys

from sqlmodel import Session

from meme_ideas.database import engine, init_db
from meme_ideas.logging_config import setup_logging
from meme_ideas.services.template_service import seed_system_templates


def main() -> int:
    setup_logging()
    init_db()
    with Session(engine) as session:
        inserted = seed_system_templates(session)
    print(f"Inserted {inserted} system templates into {engine.url}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
