"""
데이터베이스 연결 관리

.env의 DATABASE_* 값이 모두 있으면 PostgreSQL(asyncpg)에,
없으면 로컬 SQLite 파일에 연결합니다.
"""
import logging
import os
from typing import Optional

from dotenv import load_dotenv
from tortoise import Tortoise

logger = logging.getLogger(__name__)

load_dotenv()

DEFAULT_SQLITE_URL = "sqlite://db.sqlite3"


def build_db_url() -> str:
    """환경변수로부터 DB URL 생성"""
    host = os.getenv("DATABASE_URL")
    user = os.getenv("DATABASE_USER")
    password = os.getenv("DATABASE_PASSWORD")
    port = os.getenv("DATABASE_PORT")
    name = os.getenv("DATABASE_TABLE")

    if host and user and password and port and name:
        return f"postgres://{user}:{password}@{host}:{port}/{name}"
    return os.getenv("SQLITE_URL") or DEFAULT_SQLITE_URL


async def init_db(db_url: Optional[str] = None, generate_schemas: bool = True) -> None:
    """
    Tortoise ORM 초기화

    Args:
        db_url: DB URL (None이면 환경변수 사용)
        generate_schemas: 테이블 자동 생성 여부
    """
    url = db_url or build_db_url()
    logger.info(f"Connecting database: {url.split('@')[-1]}")

    await Tortoise.init(
        db_url=url,
        modules={"models": ["models"]}
    )
    if generate_schemas:
        await Tortoise.generate_schemas()


async def close_db() -> None:
    """DB 연결 종료"""
    await Tortoise.close_connections()
    logger.info("Database connections closed")
