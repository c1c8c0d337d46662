from typing import Optional
import logging

from fastapi import FastAPI, Request, Query, Depends
from fastapi.responses import JSONResponse

from pantrypal.api.dependencies import get_notice_board
from pantrypal.api.routes import pantry as pantry_routes
from pantrypal.api.routes import recipes as recipe_routes
from pantrypal.api.routes import receipt as receipt_routes
from pantrypal.domain.Pantry import Pantry
from pantrypal.events.Event_Bus import EventBus
from pantrypal.events.notices import NoticeBoard, publish_notice
from pantrypal.infra.Key_Value_Store import JsonFileStore
from pantrypal.infra.Pantry_Repository import PantryRepository
from pantrypal.logic.recipes.suggestions import load_catalog
from pantrypal.utilities.config import DATA_DIR
from pantrypal.utilities.constants import NOTICE_ERROR
from pantrypal.utilities.exceptions import PantryError

# Logging
logger = logging.getLogger("pantrypal_app")


def build_pantry(event_bus: Optional[EventBus] = None) -> Pantry:
    """Pantry backed by the JSON file store in DATA_DIR."""
    repository = PantryRepository(JsonFileStore(DATA_DIR))
    return Pantry(repository, event_bus=event_bus)


def create_app(pantry: Optional[Pantry] = None, notices: Optional[NoticeBoard] = None, catalog=None) -> FastAPI:
    """Build the API around one pantry; the pantry is created here unless given."""
    if pantry is None:
        pantry = build_pantry()
    if notices is None:
        notices = NoticeBoard()
    notices.attach(pantry.event_bus)

    app = FastAPI(title="PantryPal API")
    app.state.pantry = pantry
    app.state.notices = notices
    app.state.catalog = catalog if catalog is not None else load_catalog()

    app.include_router(pantry_routes.router)
    app.include_router(recipe_routes.router)
    app.include_router(receipt_routes.router)

    @app.exception_handler(PantryError)
    async def _pantry_error_handler(request: Request, exc: PantryError):
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
        publish_notice(request.app.state.pantry.event_bus, exc.message, NOTICE_ERROR)
        return JSONResponse(status_code=exc.http_status, content=exc.to_dict())

    @app.get("/api/notices")
    def live_notices(since: Optional[int] = Query(default=None), board: NoticeBoard = Depends(get_notice_board)):
        return board.get_notices(since)

    logger.info("PantryPal API ready with %d items", len(pantry))
    return app
