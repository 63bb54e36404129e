from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success_response(data: Optional[Any] = None, message: str = "OK", status: int = 200) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content={
            "ok": True,
            "data": jsonable_encoder(data, by_alias=True) if data is not None else {},
            "error": None,
            "message": message,
        }
    )


def error_response(error_code: str, status: int = 400, message: str = "An error occurred", data: Optional[Any] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content={
            "ok": False,
            "data": jsonable_encoder(data, by_alias=True) if data is not None else {},
            "error": error_code,
            "message": message,
        }
    )
