from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Avatar(str, Enum):
    """Fixed set of avatar images a player can pick from; `ONE` is the default."""

    ONE = "ONE"
    TWO = "TWO"
    THREE = "THREE"
    FOUR = "FOUR"
    FIVE = "FIVE"
    SIX = "SIX"
    SEVEN = "SEVEN"
    EIGHT = "EIGHT"
    NINE = "NINE"
    TEN = "TEN"
    ELEVEN = "ELEVEN"
    TWELVE = "TWELVE"
    THIRTEEN = "THIRTEEN"
    FOURTEEN = "FOURTEEN"
    FIFTEEN = "FIFTEEN"
    SIXTEEN = "SIXTEEN"


class Player(BaseModel):
    """Local player identity. Always fully populated and replaced as a whole."""

    model_config = ConfigDict(frozen=True)

    first_name: str = ""
    last_initial: str = ""
    avatar: Avatar = Avatar.ONE
