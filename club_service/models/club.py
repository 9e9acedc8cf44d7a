"""
club.py

클럽(Club) 모델 정의 파일.

- id       : DB가 발급하는 정수 PK (발급 후 변경 불가)
- name     : 클럽 이름
- nickname : 클럽 별칭

name / nickname 에는 유니크 제약을 두지 않는다.

"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from club_service.db.base import Base


NAME_MAX_LENGTH = 100


class Club(Base):
    __tablename__ = "clubs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    nickname: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)

    def __repr__(self) -> str:
        return f"<Club id={self.id} name={self.name!r}>"
