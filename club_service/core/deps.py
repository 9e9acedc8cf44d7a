from typing import Generator

from fastapi import Request
from sqlalchemy.orm import Session


# 앱 생성 시 주입된 sessionmaker(app.state.session_factory)로 요청 단위 세션 생성
def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
