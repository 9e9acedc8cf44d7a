"""
services/clubs.py

클럽(Club) 도메인의 DB 접근 로직 모음.

라우터는 이 파일의 함수를 호출하여 결과를 받고
HTTP 상태 코드 / 응답 변환만 처리한다.

설계 원칙:
- HTTP / FastAPI 의존성 없음
- 트랜잭션 제어(commit / rollback)는 라우터에서 수행
- 존재하지 않는 club은 예외 대신 None / False로 표현

관련 파일:
- club_service.models.club     : Club 모델
- club_service.routers.clubs   : 클럽 CRUD API

"""

import re

from sqlalchemy import select
from sqlalchemy.orm import Session

from club_service.models.club import Club


_CLUB_ID_RE = re.compile(r"[0-9]+")

# 대부분의 DB에서 INTEGER PK가 표현할 수 있는 최대값 (signed 64-bit)
MAX_CLUB_ID = 2**63 - 1


"""
path 파라미터 club id 해석

- ASCII 10진수 숫자 문자열만 허용 (개행 / 유니코드 숫자 불가)
- 형식이 맞지 않거나 범위를 벗어나면 None 반환 (조회 결과 없음으로 취급)

"""

def parse_club_id(raw: str) -> int | None:
    if not _CLUB_ID_RE.fullmatch(raw):
        return None
    value = int(raw)
    if value > MAX_CLUB_ID:
        return None
    return value


def list_clubs(db: Session) -> list[Club]:
    return list(db.scalars(select(Club).order_by(Club.id)).all())


def get_club(db: Session, club_id: int) -> Club | None:
    return db.get(Club, club_id)


"""
클럽 생성

- 생성 즉시 flush 하여 id 발급
- commit은 호출 측에서 수행

"""
def create_club(db: Session, *, name: str, nickname: str) -> Club:
    club = Club(name=name, nickname=nickname)
    db.add(club)
    db.flush()
    return club


"""
클럽 수정 (name / nickname 전체 교체)

- 대상이 없으면 None 반환

"""
def update_club(db: Session, club_id: int, *, name: str, nickname: str) -> Club | None:
    club = get_club(db, club_id)
    if club is None:
        return None

    club.name = name
    club.nickname = nickname
    db.flush()
    return club


def delete_club(db: Session, club_id: int) -> bool:
    club = get_club(db, club_id)
    if club is None:
        return False

    db.delete(club)
    db.flush()
    return True
