"""Example FastAPI app using content-negotiated error responses.

Run with:
    ERROR_HANDLER_DISPLAY_ERROR_DETAILS=true uvicorn examples.error_handling_example_app:app --reload

Then try:
    curl -H 'Accept: application/json' http://localhost:8000/boom
    curl -H 'Accept: application/vnd.api+json' http://localhost:8000/articles/42
    curl -X DELETE -H 'Accept: text/xml' http://localhost:8000/articles/42
"""
from __future__ import annotations

from fastapi import FastAPI, Request

from fastapi_errors import (
    HttpMethodNotAllowedError,
    HttpNotFoundError,
    get_settings,
    install_error_handling,
)
from fastapi_errors.logging_config import configure_logging

settings = get_settings()
configure_logging(settings.log_level, settings.log_json)

app = FastAPI(title="Error handling example")
install_error_handling(app, settings)

ARTICLES = {1: "Hello, world"}


@app.get("/boom")
async def boom() -> dict[str, str]:
    raise RuntimeError("Something exploded")


@app.get("/articles/{article_id}")
async def get_article(request: Request, article_id: int) -> dict[str, str]:
    if article_id not in ARTICLES:
        raise HttpNotFoundError(request, f"Article {article_id} does not exist")
    return {"id": str(article_id), "title": ARTICLES[article_id]}


@app.delete("/articles/{article_id}")
async def delete_article(request: Request, article_id: int) -> None:
    raise HttpMethodNotAllowedError(request, allowed_methods=["GET"])
