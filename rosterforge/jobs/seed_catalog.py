"""
Job to seed the sample catalog.

Loads the sample characters, combo, and deck into an empty database.
Can be run as a standalone script or called at application startup.
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from rosterforge.db.database import async_session_factory, init_db
from rosterforge.db.operations import (
    create_character,
    create_combo,
    create_deck,
    get_all_characters,
)
from rosterforge.services.sample_catalog import (
    SAMPLE_CHARACTERS,
    SAMPLE_COMBOS,
    SAMPLE_DECK_MEMBERS,
    SAMPLE_DECK_NAME,
)

logger = logging.getLogger(__name__)


async def seed_sample_catalog(session: AsyncSession) -> int:
    """
    Insert the sample catalog if no characters exist yet.

    Sample references to characters (by 1-based position) are mapped to the
    ids the database assigns.

    Returns:
        Number of characters created (0 if the catalog was already populated)
    """
    existing = await get_all_characters(session)
    if existing:
        logger.info("Catalog already has %d characters, skipping seed", len(existing))
        return 0

    ids: list[int] = []
    for sample in SAMPLE_CHARACTERS:
        character = await create_character(
            session,
            name=sample.name,
            position=sample.position,
            rarity=sample.rarity,
            stats=sample.stats,
            level=sample.level,
            awakening=sample.awakening,
            rating=sample.rating,
        )
        ids.append(character.id)

    for combo in SAMPLE_COMBOS:
        await create_combo(
            session,
            name=combo.name,
            description=combo.description,
            required_member_ids=[ids[position - 1] for position in combo.required],
            effects=combo.effects,
        )

    await create_deck(
        session,
        SAMPLE_DECK_NAME,
        [ids[position - 1] for position in SAMPLE_DECK_MEMBERS],
    )

    logger.info(
        "Seeded %d characters, %d combos and 1 deck",
        len(ids),
        len(SAMPLE_COMBOS),
    )
    return len(ids)


async def run_seed() -> int:
    """Create tables if needed and seed the sample catalog."""
    await init_db()

    async with async_session_factory() as session:
        created = await seed_sample_catalog(session)
        await session.commit()

    return created


def main() -> None:
    """CLI entry point for seeding the sample catalog."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run_seed())


if __name__ == "__main__":
    main()
