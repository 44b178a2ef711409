from pydantic import BaseModel, Field

from .models import Song


class SongRecord(BaseModel):
    """A song entry as it appears in a JSON catalog file."""

    id: str = Field(min_length=1)
    title: str
    artist: str
    genre: str = ""
    duration: int = Field(gt=0)
    cover: str = "/placeholder.svg"
    plays: int = Field(default=0, ge=0)
    src: str = ""

    model_config = {"frozen": True, "coerce_numbers_to_str": True}

    def to_song(self) -> Song:
        return Song(**self.model_dump())
