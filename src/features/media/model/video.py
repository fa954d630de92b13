from pydantic import BaseModel


class Video(BaseModel):
    """A video message built from an already uploaded video 'media_id'."""
    media_id: str
    title: str | None = None
    description: str | None = None
