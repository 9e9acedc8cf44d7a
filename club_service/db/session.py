"""
session.py

데이터베이스 엔진 및 세션(Session) 관리 파일.

이 파일은 SQLAlchemy Engine과 SessionLocal을 생성하여
애플리케이션 전반에서 공통으로 사용하는 DB 연결을 관리한다.

SessionLocal은 기본값일 뿐이며,
create_app(session_factory=...)으로 다른 sessionmaker를 주입할 수 있다.
(테스트에서 별도 DB / 장애 DB 주입 용도)

설계 원칙:
- DB 연결 설정은 한 곳에서만 정의
- 세션 생성/종료 책임을 명확히 분리
- pool_pre_ping=True로 유휴 연결 오류 방지

관련 파일:
- club_service.core.config   : DATABASE_URL 설정
- club_service.core.deps     : get_db 의존성

"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from club_service.core.config import settings
from club_service.db.base import Base


def build_engine(url: str, **kwargs) -> Engine:
    connect_args = kwargs.pop("connect_args", {})
    # SQLite 커넥션을 threadpool의 다른 스레드에서 사용 가능하도록
    if url.startswith("sqlite"):
        connect_args.setdefault("check_same_thread", False)
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


engine = build_engine(settings.DATABASE_URL)

# 요청 단위로 사용할 세션 팩토리
SessionLocal = build_session_factory(engine)


"""
테이블 생성

- 마이그레이션 도구 없이 Base.metadata 기준 create_all 수행
- 이미 존재하는 테이블은 건드리지 않음

"""
def init_db(session_factory: sessionmaker) -> None:
    # Base.metadata에 테이블 등록
    import club_service.models.club  # noqa: F401

    Base.metadata.create_all(bind=session_factory.kw["bind"])
