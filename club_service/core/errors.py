"""
errors.py

API 에러 타입 및 예외 핸들러 정의 파일.

모든 에러 응답은 {"error": "<메시지>"} 형태로 통일한다.

에러 분류:
- InvalidInputError (400) : 요청 body 검증 실패
- NotFoundError     (404) : 존재하지 않거나 해석할 수 없는 club id
- InternalError     (500) : DB 호출 중 발생한 모든 예외

관련 파일:
- club_service.main          : register_exception_handlers 호출
- club_service.routers.clubs : 에러 발생 지점

"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class ClubAPIError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(ClubAPIError):
    status_code = 400
    default_message = "Invalid input"


class NotFoundError(ClubAPIError):
    status_code = 404
    default_message = "Club not found"


class InternalError(ClubAPIError):
    status_code = 500


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


"""
pydantic 검증 에러 메시지 변환

- loc의 첫 요소(body/path/query)는 제외하고 필드 경로만 표시
- 예: "Invalid input: name: Value error, name must not be blank"

"""
def format_validation_errors(errors) -> str:
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ())[1:]]
        field = ".".join(loc) if loc else "body"
        parts.append(f"{field}: {err.get('msg', 'invalid value')}")
    return "Invalid input: " + "; ".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ClubAPIError)
    async def club_api_error_handler(request: Request, exc: ClubAPIError):
        return _error_response(exc.status_code, exc.message)

    # FastAPI 기본값(422) 대신 400으로 응답
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _error_response(400, format_validation_errors(exc.errors()))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )
