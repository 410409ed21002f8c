"""
pytest 설정 및 공통 픽스처 정의
"""
import sys
from pathlib import Path
from typing import AsyncGenerator

import pytest

# 프로젝트 루트를 Python 경로에 추가
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# =============================================================================
# pytest 설정
# =============================================================================


def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


# =============================================================================
# 데이터베이스 픽스처
# =============================================================================


@pytest.fixture(scope="function")
async def test_db() -> AsyncGenerator[None, None]:
    """
    테스트용 인메모리 SQLite 데이터베이스
    각 테스트 함수마다 새로운 DB 생성
    """
    from tortoise import Tortoise

    await Tortoise.init(
        db_url="sqlite://:memory:",
        modules={"models": ["models"]}
    )
    await Tortoise.generate_schemas()

    yield

    await Tortoise.close_connections()


@pytest.fixture
async def seeded_db(test_db) -> AsyncGenerator[None, None]:
    """참조 데이터(스탯 종류, 세트)가 시드된 DB"""
    from models.repos.reference_repo import seed_reference_data

    await seed_reference_data()
    yield


@pytest.fixture
async def user(seeded_db):
    """기본 테스트 사용자"""
    from models.repos import users_repo

    return await users_repo.create_user("TestUser")


# =============================================================================
# 엔티티 팩토리 픽스처
# =============================================================================


@pytest.fixture
def gear_snapshot_factory():
    """테스트용 GearSnapshot 생성 팩토리"""
    from config.gear import MainStatType
    from service.scoring.score_service import GearSnapshot, SubstatSnapshot

    def _create_snapshot(
        main_stat_type=MainStatType.SPEED,
        main_stat_value: float = 45,
        substats: tuple = (("Attack %", 8), ("Crit %", 5)),
    ) -> GearSnapshot:
        return GearSnapshot(
            main_stat_type=main_stat_type,
            main_stat_value=main_stat_value,
            substats=tuple(SubstatSnapshot(name, value) for name, value in substats),
        )

    return _create_snapshot


@pytest.fixture
def item_factory():
    """테스트용 익스포트 장비 레코드 생성 팩토리"""
    from tests.fixtures.export_payloads import make_item

    return make_item


@pytest.fixture
def hero_factory():
    """테스트용 익스포트 영웅 레코드 생성 팩토리"""
    from tests.fixtures.export_payloads import make_hero

    return make_hero
