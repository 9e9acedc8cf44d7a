import pytest

from club_service.services import clubs as clubs_service
from club_service.models.club import Club


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", 1),
        ("42", 42),
        ("007", 7),
        ("abc", None),
        ("", None),
        ("1.0", None),
        ("-3", None),
        (" 1", None),
        ("1_000", None),
        ("1\n", None),
        ("\u0661", None),
        (str(clubs_service.MAX_CLUB_ID), clubs_service.MAX_CLUB_ID),
        (str(clubs_service.MAX_CLUB_ID + 1), None),
    ],
)
def test_parse_club_id(raw, expected):
    assert clubs_service.parse_club_id(raw) == expected


def test_create_and_get_club(db):
    club = clubs_service.create_club(db, name="FC Barcelona", nickname="Barça")
    db.commit()

    assert club.id is not None
    fetched = clubs_service.get_club(db, club.id)
    assert fetched is club


def test_list_clubs_ordered_by_id(db):
    a = clubs_service.create_club(db, name="B club", nickname="b")
    b = clubs_service.create_club(db, name="A club", nickname="a")
    db.commit()

    rows = clubs_service.list_clubs(db)
    assert [c.id for c in rows] == sorted([a.id, b.id])


def test_update_club_missing_returns_none(db):
    assert clubs_service.update_club(db, 12345, name="x", nickname="y") is None


def test_update_club(db):
    club = clubs_service.create_club(db, name="FC Barcelona", nickname="Barça")
    db.commit()

    updated = clubs_service.update_club(db, club.id, name="Real Madrid", nickname="Los Blancos")
    db.commit()

    assert updated.id == club.id
    assert db.get(Club, club.id).name == "Real Madrid"


def test_delete_club(db):
    club = clubs_service.create_club(db, name="FC Barcelona", nickname="Barça")
    db.commit()
    club_id = club.id

    assert clubs_service.delete_club(db, club_id) is True
    db.commit()
    assert clubs_service.get_club(db, club_id) is None
    assert clubs_service.delete_club(db, club_id) is False
