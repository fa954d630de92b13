from pydantic import BaseModel, ConfigDict, Field


class UploadResponse(BaseModel):
    """Uploaded media info; 'media_id' stays valid for 3 days and can be reused."""

    model_config = ConfigDict(extra = "ignore", populate_by_name = True)

    media_type: str = Field(alias = "type")
    media_id: str
    created_at: int


class ThumbUploadResponse(BaseModel):
    """Thumb uploads answer with 'thumb_media_id' instead of 'media_id'."""

    model_config = ConfigDict(extra = "ignore")

    media_type: str = Field(alias = "type")
    thumb_media_id: str
    created_at: int

    def to_upload_response(self) -> UploadResponse:
        return UploadResponse(
            media_type = self.media_type,
            media_id = self.thumb_media_id,
            created_at = self.created_at,
        )
