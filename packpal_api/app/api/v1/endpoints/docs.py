"""
Interactive API documentation, served only to logged-in users.

FastAPI's built-in ``/docs``, ``/redoc`` and ``/openapi.json`` routes are
switched off in ``create_app``; these replacements sit behind the same
session check as the rest of the API.
"""

from fastapi import APIRouter, Request
from fastapi.openapi.docs import get_redoc_html, get_swagger_ui_html
from fastapi.responses import HTMLResponse, JSONResponse


router = APIRouter()

OPENAPI_URL = "/openapi.json"


@router.get(OPENAPI_URL, include_in_schema=False)
async def openapi_schema(request: Request) -> JSONResponse:
    return JSONResponse(request.app.openapi())


@router.get("/docs", include_in_schema=False)
async def swagger_ui(request: Request) -> HTMLResponse:
    return get_swagger_ui_html(openapi_url=OPENAPI_URL, title=f"{request.app.title} - Swagger UI")


@router.get("/redoc", include_in_schema=False)
async def redoc(request: Request) -> HTMLResponse:
    return get_redoc_html(openapi_url=OPENAPI_URL, title=f"{request.app.title} - ReDoc")
