# tests/helpers.py
from sqlalchemy.orm import Session

from club_service.models.club import Club


def create_club_via_api(client, *, name: str = "FC Barcelona", nickname: str = "Barça") -> dict:
    r = client.post("/clubs", json={"name": name, "nickname": nickname})
    assert r.status_code == 201, r.text
    return r.json()


def create_club_in_db(db: Session, *, name: str, nickname: str) -> Club:
    club = Club(name=name, nickname=nickname)
    db.add(club)
    db.commit()
    db.refresh(club)
    return club
