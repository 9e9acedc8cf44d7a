"""
clubs.py

클럽(Club) CRUD API 모음.

주요 기능:
- 클럽 생성 / 전체 목록 조회 / 단건 조회 / 수정 / 삭제

설계 원칙:
- 각 엔드포인트는 service 함수 호출 1회 + commit/rollback만 수행
- DB 호출 중 발생한 예외는 rollback 후 500으로 변환 (원인 구분 없음)
- 존재하지 않는 id는 조회/수정/삭제 모두 404로 통일
- 잘못된 형식의 id(예: "abc")는 별도 에러 없이 404

관련 파일:
- club_service.services.clubs  : DB 접근 로직
- club_service.schemas.club    : 요청 / 응답 스키마
- club_service.core.errors     : 에러 타입 및 응답 형태

"""

import logging

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session

from club_service.core.deps import get_db
from club_service.core.errors import InternalError, NotFoundError
from club_service.schemas.club import (
    ClubCreateRequest,
    ClubResponse,
    ClubUpdateRequest,
    ErrorResponse,
)
from club_service.services import clubs as clubs_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/clubs", tags=["clubs"])

ClubIdPath = Annotated[str, Path(description="The ID of the club", examples=["1"])]

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid input"},
    404: {"model": ErrorResponse, "description": "Club not found"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}


def _resolve_id(raw: str) -> int:
    club_id = clubs_service.parse_club_id(raw)
    if club_id is None:
        raise NotFoundError("Club not found")
    return club_id


"""
클럽 생성 API

- name, nickname 필수 (공백 문자열 불가)
- 성공 시 201 + 생성된 레코드(id 포함)

"""
@router.post(
    "",
    response_model=ClubResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new club",
    description="Creates a new club with a name and nickname.",
    responses={k: _ERROR_RESPONSES[k] for k in (400, 500)},
)
def create_club(data: ClubCreateRequest, db: Session = Depends(get_db)):
    try:
        club = clubs_service.create_club(db, name=data.name, nickname=data.nickname)
        db.commit()
        db.refresh(club)
    except Exception:
        db.rollback()
        logger.exception("Failed to create club")
        raise InternalError("Error creating club")

    logger.info("Created club %s", club.id)
    return club


@router.get(
    "",
    response_model=list[ClubResponse],
    summary="Get all clubs",
    description="Returns a list of all clubs.",
    responses={500: _ERROR_RESPONSES[500]},
)
def list_clubs(db: Session = Depends(get_db)):
    try:
        return clubs_service.list_clubs(db)
    except Exception:
        logger.exception("Failed to list clubs")
        raise InternalError("Error fetching clubs")


@router.get(
    "/{club_id}",
    response_model=ClubResponse,
    summary="Get a club by ID",
    description="Returns a single club by its ID.",
    responses={k: _ERROR_RESPONSES[k] for k in (404, 500)},
)
def get_club(club_id: ClubIdPath, db: Session = Depends(get_db)):
    pk = _resolve_id(club_id)
    try:
        club = clubs_service.get_club(db, pk)
    except Exception:
        logger.exception("Failed to fetch club %s", pk)
        raise InternalError("Error fetching club")

    if club is None:
        raise NotFoundError("Club not found")
    return club


"""
클럽 수정 API

- name, nickname 전체 교체 (둘 다 필수)
- 같은 요청을 반복해도 결과 동일

"""
@router.put(
    "/{club_id}",
    response_model=ClubResponse,
    summary="Update a club by ID",
    description="Updates the name and nickname of a specific club.",
    responses=_ERROR_RESPONSES,
)
def update_club(
    data: ClubUpdateRequest,
    club_id: ClubIdPath,
    db: Session = Depends(get_db),
):
    pk = _resolve_id(club_id)
    try:
        club = clubs_service.update_club(db, pk, name=data.name, nickname=data.nickname)
        if club is not None:
            db.commit()
            db.refresh(club)
    except Exception:
        db.rollback()
        logger.exception("Failed to update club %s", pk)
        raise InternalError("Error updating club")

    if club is None:
        raise NotFoundError("Club not found")

    logger.info("Updated club %s", pk)
    return club


@router.delete(
    "/{club_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a club by ID",
    description="Deletes a specific club using its ID.",
    responses={k: _ERROR_RESPONSES[k] for k in (404, 500)},
)
def delete_club(club_id: ClubIdPath, db: Session = Depends(get_db)):
    pk = _resolve_id(club_id)
    try:
        deleted = clubs_service.delete_club(db, pk)
        if deleted:
            db.commit()
    except Exception:
        db.rollback()
        logger.exception("Failed to delete club %s", pk)
        raise InternalError("Error deleting club")

    if not deleted:
        raise NotFoundError("Club not found")

    logger.info("Deleted club %s", pk)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
