"""PN-MAIN Web Server - home page and echo API."""

from typing import Any, Optional

from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Route

import pn_main.web_server.routing  # noqa: F401 - registers the "segment" convertor
from pn_main.config import ServerConfig
from pn_main.errors import error_to_web_response, get_http_status
from pn_main.exceptions import PnMainError, SerializationError
from pn_main.logger import Logger, session_logger
from pn_main.web_server.payload import EchoPayload
from pn_main.web_server.static import serve_html_file

NOT_FOUND_BODY = "404 page not found"


class PnMainWebServer:
    """Web server exposing `GET /` and `POST /{rootParam}`.

    Any other method/path combination answers 404.
    """

    def __init__(
        self,
        config: Optional[ServerConfig] = None,
        logger: Optional[Logger] = None,
    ):
        self.config = config or ServerConfig.default()
        self.logger = logger or session_logger
        self.host = self.config.host
        self.port = self.config.port
        self.app = self._create_app()

    def _create_app(self) -> Any:
        """Create the Starlette application."""
        self.logger.info("Building route table.")

        routes = [
            Route("/", endpoint=self.home, methods=["GET"]),
            Route("/{rootParam:segment}", endpoint=self.echo, methods=["POST"]),
        ]

        # A path that matches with the wrong method raises 405; both are
        # answered as not found
        exception_handlers = {
            404: self.not_found,
            405: self.not_found,
            PnMainError: self.handle_app_error,
        }

        app = Starlette(debug=False, routes=routes, exception_handlers=exception_handlers)
        # "/hello/" is an unknown path, not a redirect to "/hello"
        app.router.redirect_slashes = False
        return app

    async def home(self, request: Request) -> Response:
        """Home page."""
        self.logger.info("Executing home handler.")
        return serve_html_file(self.config.home_html_path)

    async def echo(self, request: Request) -> JSONResponse:
        """Echo the path segment back with the current UTC time."""
        self.logger.info("Executing echo handler, which is an Easter Egg!")

        params = dict(request.path_params)
        payload = EchoPayload.build(params["rootParam"])

        self.logger.debug(
            "RESPONSE-echo",
            responseData=payload.to_dict(),
            allParams=params,
            fullURL=str(request.url),
        )

        try:
            return JSONResponse(payload.to_dict())
        except (TypeError, ValueError) as e:
            raise SerializationError(
                "RESPONSE_ENCODING_FAILED",
                "Failed to encode echo response",
                details={"error": str(e)},
            ) from e

    async def not_found(self, request: Request, exc: HTTPException) -> PlainTextResponse:
        self.logger.info(
            "Route not found",
            method=request.method,
            path=request.url.path,
            status=exc.status_code,
        )
        return PlainTextResponse(NOT_FOUND_BODY, status_code=404)

    async def handle_app_error(self, request: Request, exc: PnMainError) -> JSONResponse:
        """Turn a request-scoped error into an HTTP error response."""
        status_code = get_http_status(exc)
        log = self.logger.error if status_code >= 500 else self.logger.warning
        log(
            "Request failed",
            method=request.method,
            path=request.url.path,
            status=status_code,
            error_code=exc.code,
            error=str(exc),
        )
        return JSONResponse(error_to_web_response(exc), status_code=status_code)

    def get_app(self) -> Any:
        """Return the ASGI application."""
        return self.app
