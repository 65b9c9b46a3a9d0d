import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from rosterforge.models.character import Character, Position, Rarity
from rosterforge.models.combo import Combo
from rosterforge.models.db import Base
from rosterforge.models.stats import StatVector


@pytest.fixture
def pitcher() -> Character:
    """Character X: a pitcher with velocity 3, control 2."""
    return Character(
        id=1,
        name="猪狩 守",
        position=Position.PITCHER,
        rarity=Rarity.SR,
        stats=StatVector(velocity=3, control=2),
    )


@pytest.fixture
def outfielder() -> Character:
    """Character Y: an outfielder with contact 3, speed 3, arm 2."""
    return Character(
        id=2,
        name="友沢 亮",
        position=Position.OUTFIELD,
        rarity=Rarity.R,
        stats=StatVector(contact=3, speed=3, arm=2),
    )


@pytest.fixture
def catcher() -> Character:
    return Character(
        id=3,
        name="六道 聖",
        position=Position.CATCHER,
        rarity=Rarity.PR,
        stats=StatVector(arm=2, fielding=3),
    )


@pytest.fixture
def characters(pitcher: Character, outfielder: Character, catcher: Character) -> list[Character]:
    return [pitcher, outfielder, catcher]


@pytest.fixture
def success_combo() -> Combo:
    """Combo requiring characters 1 and 2: +1 to all stats, plus a display-only recovery."""
    return Combo.from_raw(
        id=1,
        name="サクセスコンボ",
        description="猪狩守と友沢亮の組み合わせにより発動",
        required_member_ids=[1, 2],
        raw_effects={"全ステータス": 1, "疲労回復": 5},
    )


@pytest.fixture
async def async_engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def session(async_engine) -> AsyncSession:
    """Provide a database session for tests."""
    async_session = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as session:
        yield session
