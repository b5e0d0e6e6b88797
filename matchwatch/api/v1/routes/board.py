from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import HTMLResponse

from matchwatch.core.errors import EmptyReferenceError, GatewayError, NoPlayableLinkError
from matchwatch.models.schemas import CardListResponse, WatchResponse
from matchwatch.services.board import MatchBoard
from matchwatch.services.search import HOME_SCOPE, apply_filter

router = APIRouter(tags=["board"])

def new_board() -> MatchBoard:
    return MatchBoard()

@router.get("/", response_class=HTMLResponse)
async def index(q: Optional[str] = Query(default=None, description="Filter home cards by title")):
    board = new_board()
    await board.load()
    if q:
        apply_filter(board.page, q, HOME_SCOPE)
    return board.page.to_html()

@router.get("/cards", response_model=CardListResponse)
async def cards():
    board = new_board()
    result = await board.load()
    if result is None:
        raise HTTPException(status_code=502, detail="Error loading matches")
    return CardListResponse(
        shape=result.payload.shape,
        generated_at=datetime.now(timezone.utc),
        live=result.live,
        upcoming=result.upcoming,
    )

@router.get("/watch", response_model=WatchResponse)
async def watch(url: str = Query(default=""), title: str = Query(default="")):
    board = new_board()
    try:
        src = await board.player.resolve(url)
    except EmptyReferenceError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NoPlayableLinkError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except GatewayError:
        raise HTTPException(status_code=502, detail="Error loading stream")
    return WatchResponse(title=title, src=src)
