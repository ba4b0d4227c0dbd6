"""
FastAPI application factory.

* Registers routes for distances, buildings and admin.
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

import logging

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from parkpath.api.middleware import limiter
from parkpath.api.routes import admin, buildings, distances
from parkpath.config import settings

logging.basicConfig(level=settings.log_level)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Campus Parking Path-Distance API",
        description=(
            "Estimates walking distances from a campus point to parking "
            "lots over a proximity graph, with a straight-line fallback "
            "for lots the graph cannot reach."
        ),
        version="1.0.0",
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Routers
    app.include_router(distances.router, prefix="/api/v1")
    app.include_router(buildings.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
