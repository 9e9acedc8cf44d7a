from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from club_service.models.club import NAME_MAX_LENGTH


class ClubWriteRequest(BaseModel):
    """생성/수정 공통 body. name, nickname 모두 필수 (전체 교체)."""

    name: StrictStr = Field(..., examples=["FC Barcelona"])
    nickname: StrictStr = Field(..., examples=["Barça"])

    # 길이 검사는 strip 이후 (저장되는 값 기준)
    @field_validator("name", "nickname")
    @classmethod
    def not_blank(cls, value: str, info) -> str:
        value = value.strip()
        if not value:
            raise ValueError(f"{info.field_name} must not be blank")
        if len(value) > NAME_MAX_LENGTH:
            raise ValueError(f"{info.field_name} must be at most {NAME_MAX_LENGTH} characters")
        return value


class ClubCreateRequest(ClubWriteRequest):
    model_config = ConfigDict(
        json_schema_extra={"examples": [{"name": "FC Barcelona", "nickname": "Barça"}]}
    )


class ClubUpdateRequest(ClubWriteRequest):
    model_config = ConfigDict(
        json_schema_extra={"examples": [{"name": "Real Madrid", "nickname": "Los Blancos"}]}
    )


class ClubResponse(BaseModel):
    id: int = Field(..., examples=[1])
    name: str
    nickname: str

    model_config = ConfigDict(from_attributes=True)


class ErrorResponse(BaseModel):
    error: str
