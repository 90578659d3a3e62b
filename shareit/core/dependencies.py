"""
FastAPI dependencies - caller identity injection.
The user id header is trusted as supplied (no authentication layer).
"""

from typing import Annotated

from fastapi import Header

from shareit.config import get_settings

settings = get_settings()

CallerId = Annotated[int, Header(alias=settings.user_id_header)]
