# api/latest.py
from typing import List

import httpx
from fastapi import APIRouter, Depends

from errors import ApiError
from models import DrawData, parse_game
from services.normalize import normalize_draw
from sources.alc import fetch_latest_all, fetch_latest_for_game, get_client

router = APIRouter()


@router.get("/latest", response_model=List[DrawData], response_model_exclude_unset=True)
async def latest(cli: httpx.AsyncClient = Depends(get_client)):
    return [normalize_draw(d) for d in await fetch_latest_all(cli)]


@router.get("/latest/{game}", response_model=DrawData, response_model_exclude_unset=True)
async def latest_for_game(game: str, cli: httpx.AsyncClient = Depends(get_client)):
    g = parse_game(game)
    draws = await fetch_latest_for_game(cli, g)
    if not draws:
        raise ApiError(f"No {g.value} draw found.", status_code=404)
    return normalize_draw(draws[0])
