"""
API Gateway Endpoint - Presentation Layer

FastAPI only hosts the HTTP connection here: one catch-all route hands
every request to the injected Router and writes back whatever it returns.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Request, Response

from src.presentation.http.request import HttpRequest
from src.presentation.http.router import Router

router = APIRouter()

ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/{path:path}", methods=ROUTED_METHODS, include_in_schema=False)
@inject
async def handle_request(
    request: Request,
    http_router: Router = Depends(Provide["http_router"]),
) -> Response:
    """Buffer the request, dispatch it and emit the router's response."""
    http_request = HttpRequest.build(
        method=request.method,
        path=request.url.path,
        headers=request.headers.items(),
        body=await request.body(),
    )
    http_response = await http_router.dispatch(http_request)
    return Response(
        content=http_response.body,
        status_code=http_response.status_code,
        headers=http_response.headers,
    )
