# api/draw_dates.py
from typing import List

import httpx
from fastapi import APIRouter, Depends

from models import parse_game
from services.draw_range import get_draw_dates
from sources.alc import get_client

router = APIRouter()


@router.get("/draw_dates/{game}", response_model=List[str])
async def draw_dates(game: str, cli: httpx.AsyncClient = Depends(get_client)):
    return await get_draw_dates(cli, parse_game(game))
