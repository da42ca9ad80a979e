"""Tests for ErrorMiddleware and install_error_handling."""

import json

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient
from starlette.responses import JSONResponse

from fastapi_errors import (
    ErrorHandler,
    ErrorHandlerSettings,
    ErrorMiddleware,
    ErrorRendererConfigurationError,
    HttpMethodNotAllowedError,
    HttpNotFoundError,
    install_error_handling,
)

from .conftest import RecordingSink


class CustomError(Exception):
    pass


class SpecificCustomError(CustomError):
    pass


def build_app() -> FastAPI:
    app = FastAPI()

    @app.get("/boom")
    async def boom():
        raise RuntimeError("Oops..")

    @app.get("/missing")
    async def missing(request: Request):
        raise HttpNotFoundError(request, "nothing here")

    @app.delete("/locked")
    async def locked(request: Request):
        raise HttpMethodNotAllowedError(request, allowed_methods=["GET", "HEAD"])

    @app.get("/custom")
    async def custom():
        raise SpecificCustomError("custom failure")

    @app.get("/ok")
    async def ok():
        return {"status": "ok"}

    return app


async def _get(app, method, path, accept=None):
    headers = {"accept": accept} if accept is not None else {}
    transport = ASGITransport(app=app, raise_app_exceptions=True)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.request(method, path, headers=headers)


class TestErrorMiddleware:
    @pytest.mark.asyncio
    async def test_unhandled_error_becomes_500_json(self):
        app = build_app()
        app.add_middleware(ErrorMiddleware, display_error_details=False, log_errors=False)

        response = await _get(app, "GET", "/boom", "application/json")

        assert response.status_code == 500
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {"message": "Application Error"}

    @pytest.mark.asyncio
    async def test_details_displayed_when_enabled(self):
        app = build_app()
        app.add_middleware(ErrorMiddleware, display_error_details=True)

        response = await _get(app, "GET", "/boom", "application/json")

        assert response.json()["exception"][0]["message"] == "Oops.."

    @pytest.mark.asyncio
    async def test_http_error_status_and_html_default(self):
        app = build_app()
        app.add_middleware(ErrorMiddleware)

        response = await _get(app, "GET", "/missing")

        assert response.status_code == 404
        assert response.headers["content-type"] == "text/html"
        assert "404 Not Found" in response.text

    @pytest.mark.asyncio
    async def test_method_not_allowed_sets_allow(self):
        app = build_app()
        app.add_middleware(ErrorMiddleware)

        response = await _get(app, "DELETE", "/locked", "text/xml")

        assert response.status_code == 405
        assert response.headers["allow"] == "GET, HEAD"
        assert response.text.startswith("<error>")

    @pytest.mark.asyncio
    async def test_successful_responses_pass_through(self):
        app = build_app()
        app.add_middleware(ErrorMiddleware)

        response = await _get(app, "GET", "/ok")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    @pytest.mark.asyncio
    async def test_logs_once_per_error(self):
        sink = RecordingSink()
        app = build_app()
        app.add_middleware(ErrorMiddleware, log_errors=True, log_sink=sink)

        await _get(app, "GET", "/boom", "text/plain")

        assert len(sink.messages) == 1
        assert "Message: Oops.." in sink.messages[0]

    @pytest.mark.asyncio
    async def test_specific_handler_matches_subclasses(self):
        def handler(request, response, exc, display_error_details):
            return JSONResponse({"handled": str(exc)}, status_code=418)

        app = build_app()
        app.add_middleware(ErrorMiddleware, error_handlers={CustomError: handler})

        response = await _get(app, "GET", "/custom")

        assert response.status_code == 418
        assert response.json() == {"handled": "custom failure"}

    @pytest.mark.asyncio
    async def test_async_default_handler(self):
        async def handler(request, response, exc, display_error_details):
            return JSONResponse(str(exc), status_code=500)

        app = build_app()
        app.add_middleware(ErrorMiddleware, default_error_handler=handler)

        response = await _get(app, "GET", "/boom")

        assert response.json() == "Oops.."

    @pytest.mark.asyncio
    async def test_invalid_renderer_propagates(self):
        app = build_app()
        app.add_middleware(
            ErrorMiddleware, default_error_handler=ErrorHandler(renderer="NoSuchRenderer")
        )

        with pytest.raises(ErrorRendererConfigurationError):
            await _get(app, "GET", "/boom")

    @pytest.mark.asyncio
    async def test_handler_returning_none_is_a_configuration_error(self):
        def handler(request, response, exc, display_error_details):
            return None

        app = build_app()
        app.add_middleware(ErrorMiddleware, default_error_handler=handler)

        with pytest.raises(ErrorRendererConfigurationError, match="expected a Response"):
            await _get(app, "GET", "/boom")


class TestHandlerRegistry:
    def test_set_error_handler_rejects_non_callable(self):
        middleware = ErrorMiddleware(app=None)
        with pytest.raises(ErrorRendererConfigurationError):
            middleware.set_error_handler(RuntimeError, "Uncallable")

    def test_set_default_error_handler_rejects_non_callable(self):
        middleware = ErrorMiddleware(app=None)
        with pytest.raises(ErrorRendererConfigurationError):
            middleware.set_default_error_handler("Uncallable")

    def test_unregistered_exception_gets_default_error_handler(self):
        middleware = ErrorMiddleware(app=None, log_errors=True)
        handler = middleware.get_error_handler(CustomError)
        assert isinstance(handler, ErrorHandler)
        assert handler.log_errors is True
        assert middleware.get_error_handler(KeyError) is handler

    def test_most_specific_handler_wins(self):
        def general(*args):
            return None

        def specific(*args):
            return None

        middleware = ErrorMiddleware(
            app=None, error_handlers={CustomError: general, SpecificCustomError: specific}
        )
        assert middleware.get_error_handler(SpecificCustomError) is specific
        assert middleware.get_error_handler(CustomError) is general


class TestInstallErrorHandling:
    @pytest.mark.asyncio
    async def test_install_uses_settings(self):
        sink = RecordingSink()
        app = build_app()
        settings = ErrorHandlerSettings(display_error_details=True, log_errors=True)
        install_error_handling(app, settings, log_sink=sink)

        response = await _get(app, "GET", "/boom", "application/vnd.api+json")

        assert response.status_code == 500
        assert response.headers["content-type"] == "application/json"
        assert json.loads(response.text)["exception"][0]["type"] == "RuntimeError"
        assert len(sink.messages) == 1

    @pytest.mark.asyncio
    async def test_unmatched_method_is_negotiated(self):
        app = build_app()
        install_error_handling(app, ErrorHandlerSettings(log_errors=False))

        response = await _get(app, "DELETE", "/ok", "text/xml")

        assert response.status_code == 405
        assert response.headers["content-type"] == "text/xml"
        assert "GET" in response.headers["allow"].split(", ")
        assert response.text.startswith("<error>")

    @pytest.mark.asyncio
    async def test_unmatched_path_reaches_default_handler(self):
        def handler(request, response, exc, display_error_details):
            return JSONResponse("Oops..", status_code=404)

        app = build_app()
        install_error_handling(
            app, ErrorHandlerSettings(log_errors=False), default_error_handler=handler
        )

        response = await _get(app, "GET", "/foo/baz/")

        assert response.status_code == 404
        assert response.json() == "Oops.."
