from typing import Any, Dict

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from signup_service.core.di.service_locator import ServiceLocator
from signup_service.core.utils.logger import get_logger
from signup_service.domain.entities.account_entity import Account
from signup_service.presentation.protocols.http import HttpRequest, HttpResponse


router = APIRouter(prefix="/api/v1/signup", tags=["signup"])
logger = get_logger("signup_router")


class AccountResponse(BaseModel):
    id: str
    name: str
    email: str


class ErrorResponse(BaseModel):
    error: str
    message: str


async def _read_body(request: Request) -> Dict[str, Any]:
    try:
        payload = await request.json()
    except ValueError as e:
        logger.warning("Undecodable signup body: %s", e)
        return {}
    if not isinstance(payload, dict):
        return {}
    return payload


def _to_json(response: HttpResponse) -> JSONResponse:
    body = response.body
    if isinstance(body, Account):
        content = AccountResponse(id=body.id, name=body.name, email=body.email).model_dump()
    elif isinstance(body, Exception):
        content = ErrorResponse(error=type(body).__name__, message=str(body)).model_dump()
    else:
        content = body
    return JSONResponse(status_code=response.status_code, content=content)


@router.post(
    "",
    response_model=AccountResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def signup(request: Request):
    controller = ServiceLocator.signup_controller()
    http_response = await controller.handle(HttpRequest(body=await _read_body(request)))
    return _to_json(http_response)
