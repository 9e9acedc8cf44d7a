import os
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, delete
from sqlalchemy.pool import StaticPool

from club_service.core.config import settings
from club_service.db.base import Base
from club_service.db.session import build_engine, build_session_factory
from club_service.main import create_app

# ✅ 모델 import (Base.metadata에 테이블 등록)
from club_service.models.club import Club


TEST_DB_URL = getattr(settings, "TEST_DATABASE_URL", None) or os.getenv("TEST_DATABASE_URL")

# TEST_DATABASE_URL이 없으면 in-memory SQLite 사용 (StaticPool로 커넥션 1개 공유)
if TEST_DB_URL:
    engine = build_engine(TEST_DB_URL)
else:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
TestingSessionLocal = build_session_factory(engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_db():
    """테스트 전체 시작/종료 때만 스키마 생성/삭제"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def clean_tables():
    """각 테스트마다 데이터 초기화 (테이블은 유지, row만 삭제)"""
    with engine.begin() as conn:
        conn.execute(delete(Club))


@pytest.fixture()
def db():
    """테스트에서 직접 DB 조작할 때 쓰는 세션"""
    session = TestingSessionLocal()
    try:
        yield session
        session.commit()
    finally:
        session.close()


@pytest.fixture()
def client():
    app = create_app(TestingSessionLocal, create_tables=False)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def broken_client(tmp_path):
    """존재하지 않는 디렉터리의 SQLite 파일을 가리키는 세션 팩토리 -> 모든 DB 호출 실패"""
    bad_url = f"sqlite:///{tmp_path / 'missing' / 'clubs.db'}"
    bad_factory = build_session_factory(build_engine(bad_url))
    app = create_app(bad_factory, create_tables=False)
    with TestClient(app) as c:
        yield c
