from typing import Callable

from features.media.model.media_type import MediaType
from features.media.model.upload_response import ThumbUploadResponse, UploadResponse

UploadResponseDecoder = Callable[[dict], UploadResponse]


def decode_upload_response(data: dict) -> UploadResponse:
    return UploadResponse.model_validate(data)


def decode_thumb_upload_response(data: dict) -> UploadResponse:
    return ThumbUploadResponse.model_validate(data).to_upload_response()


UPLOAD_RESPONSE_DECODERS: dict[MediaType, UploadResponseDecoder] = {
    MediaType.image: decode_upload_response,
    MediaType.voice: decode_upload_response,
    MediaType.video: decode_upload_response,
    MediaType.thumb: decode_thumb_upload_response,
}
