"""
API dependencies for dependency injection
"""
from fastapi import Request

from pantrypal.domain.Pantry import Pantry
from pantrypal.events.notices import NoticeBoard


def get_pantry(request: Request) -> Pantry:
    """
    The pantry built by create_app for this application.

    Usage:
        @router.get("/example")
        def example(pantry: Pantry = Depends(get_pantry)):
            ...
    """
    return request.app.state.pantry


def get_notice_board(request: Request) -> NoticeBoard:
    return request.app.state.notices


def get_catalog(request: Request):
    return request.app.state.catalog
