"""
main.py

FastAPI 애플리케이션 진입점(Entry Point).

주요 역할:
- create_app(): FastAPI 앱 인스턴스 생성 및 조립
- 로깅 / CORS / 예외 핸들러 설정
- 라우터(clubs, system) 등록
- 시작 시 테이블 생성 (AUTO_CREATE_TABLES)

설계 원칙:
- 비즈니스 로직은 포함하지 않고 설정/조립 역할만 수행
- DB 세션 팩토리는 전역이 아닌 create_app 인자로 주입
  (app.state.session_factory -> core.deps.get_db)
- 인자를 생략하면 db.session.SessionLocal 사용

실행:
- uvicorn club_service.main:app --reload

관련 파일:
- club_service.core.config        : 환경 변수 및 설정 로드
- club_service.core.deps          : DB 세션 의존성
- club_service.routers.*          : 기능별 API 라우터

"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import sessionmaker

from club_service.core.config import settings
from club_service.core.errors import register_exception_handlers
from club_service.core.logging_config import setup_logging
from club_service.db.session import SessionLocal, init_db
from club_service.routers import clubs, system


def create_app(session_factory: sessionmaker | None = None, *, create_tables: bool | None = None) -> FastAPI:
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    if create_tables is None:
        create_tables = settings.AUTO_CREATE_TABLES

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if create_tables:
            init_db(app.state.session_factory)
        yield

    app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION, lifespan=lifespan)
    app.state.session_factory = session_factory or SessionLocal

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(system.router)
    app.include_router(clubs.router)

    return app


app = create_app()
