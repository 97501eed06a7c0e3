# api/draws.py
from typing import List, Union

import httpx
from fastapi import APIRouter, Depends

from errors import ApiError
from models import DrawData, parse_game
from services.draw_range import fetch_draw_range, first_draw, get_draw_dates, parse_count
from services.normalize import normalize_draw
from sources.alc import get_client

router = APIRouter()


@router.get("/draws/{game}/{count}", response_model=List[DrawData], response_model_exclude_unset=True)
async def draws(game: str, count: str, cli: httpx.AsyncClient = Depends(get_client)):
    g = parse_game(game)
    return await fetch_draw_range(cli, g, parse_count(count))


@router.get("/draw/{game}/{date}", response_model=Union[List[DrawData], DrawData], response_model_exclude_unset=True)
async def draw(game: str, date: str, cli: httpx.AsyncClient = Depends(get_client)):
    """Draw on an exact date. An all-digit second segment is a draw count instead."""
    g = parse_game(game)
    if date.isdigit():
        return await fetch_draw_range(cli, g, parse_count(date))

    dates = await get_draw_dates(cli, g)
    if date not in dates:
        raise ApiError(f"Invalid date! Please use one of: {', '.join(dates)}")

    return normalize_draw(await first_draw(cli, g, date))
