import logging

import fastapi
from fastapi import encoders, exceptions, responses

from catalog import errors, mediator as catalog_mediator, products
from catalog.api import routes

logger = logging.getLogger("catalog")


async def _validation_failed_handler(
    request: fastapi.Request,
    exc: errors.ValidationFailed,
) -> responses.JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return responses.JSONResponse(
        status_code=fastapi.status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc), "field": exc.field},
    )


async def _request_validation_handler(
    request: fastapi.Request,
    exc: exceptions.RequestValidationError,
) -> responses.JSONResponse:
    logger.info("Rejected malformed %s %s", request.method, request.url.path)
    return responses.JSONResponse(
        status_code=fastapi.status.HTTP_400_BAD_REQUEST,
        content={"detail": encoders.jsonable_encoder(exc.errors())},
    )


async def _not_found_handler(
    request: fastapi.Request,
    exc: errors.NotFound,
) -> responses.JSONResponse:
    return responses.JSONResponse(
        status_code=fastapi.status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


def create_app(mediator: catalog_mediator.Mediator | None = None) -> fastapi.FastAPI:
    """
    Builds the HTTP application.

    The mediator, and with it the product store, is created once and shared by all requests.
    """
    app = fastapi.FastAPI(title="Product catalog")
    app.state.mediator = mediator if mediator is not None else products.bootstrap()
    app.add_exception_handler(errors.ValidationFailed, _validation_failed_handler)
    app.add_exception_handler(errors.NotFound, _not_found_handler)
    app.add_exception_handler(exceptions.RequestValidationError, _request_validation_handler)
    app.include_router(routes.router)
    return app
