"""
HTTP Router - Presentation Layer

Dispatches a request to a resource handler using the injected route table.
Every request gets exactly one response; the checks run in this order:

1. unknown path -> 404
2. OPTIONS -> 204 with the CORS preflight headers of the matched route
3. method not allowed on the matched route -> 405
4. client does not accept JSON -> 406
5. POST/PUT without a JSON content type, or with a body that is not a
   JSON object -> 400
6. handler for (resource, route kind, method)
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple

from src.presentation.controllers.devices_controller import DevicesController
from src.presentation.controllers.tasks_controller import TasksController
from src.presentation.http.cors import CorsPolicy
from src.presentation.http.request import (
    HttpRequest,
    accepts_json,
    is_json,
    parse_body_json,
)
from src.presentation.http.response import (
    HttpResponse,
    bad_request,
    content_type_not_acceptable,
    internal_server_error,
    method_not_allowed,
    no_content,
    not_found,
)
from src.presentation.http.routes import RouteKind, RouteMatch, RouteTable
from src.shared import (
    BODY_METHODS,
    EnumHttpMethod,
    bind_request_context,
    clear_request_context,
    get_logger,
)

logger = get_logger(__name__)

INVALID_CONTENT_TYPE = "Invalid Content-Type. Expected application/json"
INVALID_JSON_BODY = "Invalid JSON body"
BODY_NOT_OBJECT = "Request body must be a JSON object"


@dataclass(frozen=True)
class RouteContext:
    """What a handler gets from the router."""

    match: RouteMatch
    payload: Optional[Dict[str, Any]] = None

    @property
    def item_id(self) -> str:
        return self.match.item_id or ""


Handler = Callable[[RouteContext], Awaitable[HttpResponse]]
HandlerKey = Tuple[str, RouteKind, str]


class Router:
    def __init__(
        self,
        route_table: RouteTable,
        cors_policy: CorsPolicy,
        devices_controller: DevicesController,
        tasks_controller: TasksController,
    ):
        self.route_table = route_table
        self.cors_policy = cors_policy
        self.devices = devices_controller
        self.tasks = tasks_controller
        self._handlers = self._build_handlers()

    def _build_handlers(self) -> Dict[HandlerKey, Handler]:
        get = EnumHttpMethod.GET.value
        collection, item = RouteKind.COLLECTION, RouteKind.ITEM
        return {
            ("devices", item, get): self._view_device,
            ("devices", collection, get): self._list_devices,
            ("tasks", item, get): self._view_task,
            ("tasks", item, EnumHttpMethod.PUT.value): self._update_task,
            ("tasks", item, EnumHttpMethod.DELETE.value): self._delete_task,
            ("tasks", collection, get): self._list_tasks,
            ("tasks", collection, EnumHttpMethod.POST.value): self._create_task,
        }

    async def _view_device(self, ctx: RouteContext) -> HttpResponse:
        return await self.devices.view_device(ctx.item_id)

    async def _list_devices(self, ctx: RouteContext) -> HttpResponse:
        return await self.devices.list_devices()

    async def _view_task(self, ctx: RouteContext) -> HttpResponse:
        return await self.tasks.view_task(ctx.item_id)

    async def _update_task(self, ctx: RouteContext) -> HttpResponse:
        return await self.tasks.update_task(ctx.item_id, ctx.payload or {})

    async def _delete_task(self, ctx: RouteContext) -> HttpResponse:
        return await self.tasks.delete_task(ctx.item_id)

    async def _list_tasks(self, ctx: RouteContext) -> HttpResponse:
        return await self.tasks.list_tasks()

    async def _create_task(self, ctx: RouteContext) -> HttpResponse:
        return await self.tasks.create_task(ctx.payload or {})

    async def dispatch(self, request: HttpRequest) -> HttpResponse:
        """Produce the response for ``request``. Never raises."""
        bind_request_context(method=request.method, path=request.path)
        logger.debug("http.request.received")
        try:
            response = await self._route(request)
            logger.info("http.request.completed", status_code=response.status_code)
            return response
        finally:
            clear_request_context()

    async def _route(self, request: HttpRequest) -> HttpResponse:
        method = request.method.upper()

        match = self.route_table.match(request.path)
        if match is None:
            return not_found()

        if method == EnumHttpMethod.OPTIONS.value:
            headers = self.cors_policy.preflight_headers(match.allowed_methods)
            return no_content(headers)

        if method not in match.allowed_methods:
            return method_not_allowed(match.allowed_methods)

        if not accepts_json(request):
            return content_type_not_acceptable()

        payload: Optional[Dict[str, Any]] = None
        if method in BODY_METHODS:
            if not is_json(request):
                return bad_request(INVALID_CONTENT_TYPE)
            parsed = parse_body_json(request)
            if not parsed.ok:
                logger.info("http.request.invalid_body", error=parsed.error)
                return bad_request(INVALID_JSON_BODY)
            if not isinstance(parsed.value, dict):
                return bad_request(BODY_NOT_OBJECT)
            payload = parsed.value

        handler = self._handlers.get((match.resource, match.kind, method))
        if handler is None:
            logger.error(
                "http.route.unhandled",
                resource=match.resource,
                kind=match.kind.value,
            )
            return internal_server_error()

        try:
            return await handler(RouteContext(match=match, payload=payload))
        except Exception as e:
            logger.error("http.request.failed", error=str(e), exc_info=e)
            return internal_server_error()
