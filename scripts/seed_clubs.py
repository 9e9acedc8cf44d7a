"""

예시 클럽 데이터 생성 스크립트.

- 로컬 개발 환경 최초 세팅 시 실행하는 용도
- clubs 테이블이 비어 있을 때만 예시 클럽을 생성한다.
- 이미 데이터가 있으면 생성하지 않고 종료한다.

사용 방법
- 가상환경 접속
- (.venv) ~\backend~$ python -m scripts.seed_clubs

"""

import logging

from dotenv import load_dotenv
load_dotenv()

from sqlalchemy import func, select

from club_service.core.config import settings
from club_service.core.logging_config import setup_logging
from club_service.db.session import SessionLocal, init_db
from club_service.models.club import Club
from club_service.services.clubs import create_club

logger = logging.getLogger("scripts.seed_clubs")

SEED_CLUBS = [
    ("FC Barcelona", "Barça"),
    ("Real Madrid", "Los Blancos"),
    ("Atlético Madrid", "Los Colchoneros"),
]


def main():
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    init_db(SessionLocal)

    db = SessionLocal()
    try:
        count = db.scalar(select(func.count()).select_from(Club)) or 0
        if count:
            logger.info("clubs table already has %s rows. Skip seeding.", count)
            return

        for name, nickname in SEED_CLUBS:
            create_club(db, name=name, nickname=nickname)
        db.commit()

        logger.info("Seeded %s clubs", len(SEED_CLUBS))

    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
