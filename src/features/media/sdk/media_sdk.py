import os
import shutil
from typing import BinaryIO

from urllib3.fields import RequestField, guess_content_type
from urllib3.filepost import choose_boundary

from di.di import DI
from features.media.model.media_type import MediaType
from features.media.model.news import News
from features.media.model.upload_response import UploadResponse
from features.media.model.video import Video
from features.media.upload_response_decoders import UPLOAD_RESPONSE_DECODERS
from features.wechat.model.error_envelope import ErrorEnvelope
from features.wechat.sdk.wechat_urls import (
    media_download_url,
    media_upload_news_url,
    media_upload_url,
    media_upload_video_url,
)
from features.wechat.wechat_errors import ApiError
from util import log
from util.config import config
from util.error_codes import (
    INVALID_MEDIA_TYPE,
    MISSING_FILENAME,
    MISSING_MEDIA_ID,
    MISSING_NEWS,
    MISSING_READER,
    MISSING_VIDEO,
    MISSING_WRITER,
)
from util.errors import ValidationError
from util.functions import parse_media_type

UPLOAD_FORM_FIELD = "file"
ERROR_CONTENT_TYPES = {"text/plain", "application/json"}


class MediaSDK:

    __di: DI

    def __init__(self, di: DI):
        self.__di = di

    # === Temporary media ===

    def upload_from_file(self, media_type: MediaType | str, file_path: str) -> UploadResponse:
        with open(file_path, "rb") as file:
            return self.upload(media_type, os.path.basename(file_path), file)

    def upload(self, media_type: MediaType | str, filename: str, reader: BinaryIO | None) -> UploadResponse:
        resolved_type = MediaType.lookup(media_type)
        if resolved_type is None:
            raise ValidationError(f"Invalid media type '{media_type}'", INVALID_MEDIA_TYPE)
        if not filename:
            raise ValidationError("Filename must be provided", MISSING_FILENAME)
        if reader is None:
            raise ValidationError("Media reader must be provided", MISSING_READER)

        log.t(f"Uploading {resolved_type.value} media '{filename}'")
        token = self.__di.access_token_resolver.require_access_token()
        with self.__di.buffer_pool.borrow() as body:
            content_type = self.__write_multipart(body, filename, reader)
            body.seek(0)
            data = self.__di.wechat_api.post_multipart(
                media_upload_url(token, resolved_type.value),
                body = body,
                content_type = content_type,
            )
        self.__di.wechat_api.require_success(data)
        result = UPLOAD_RESPONSE_DECODERS[resolved_type](data)
        log.t(f"Uploaded media #{result.media_id}")
        return result

    def download_to_file(self, media_id: str, file_path: str):
        """Videos can't be downloaded from the platform."""
        with open(file_path, "wb") as file:
            self.download(media_id, file)

    def download(self, media_id: str, writer: BinaryIO | None):
        """Videos can't be downloaded from the platform."""
        if not media_id:
            raise ValidationError("Media ID must be provided", MISSING_MEDIA_ID)
        if writer is None:
            raise ValidationError("Media writer must be provided", MISSING_WRITER)

        log.t(f"Downloading media #{media_id}")
        token = self.__di.access_token_resolver.require_access_token()
        with self.__di.wechat_api.get_stream(media_download_url(token, media_id)) as response:
            content_type = parse_media_type(response.headers.get("Content-Type"))
            # the platform rejects downloads with HTTP 200 and an error document
            if content_type in ERROR_CONTENT_TYPES:
                envelope = ErrorEnvelope.model_validate(response.json())
                log.w(f"Media download failed with {envelope.errcode}: {envelope.errmsg}")
                raise ApiError(envelope.errcode, envelope.errmsg)
            size = 0
            for chunk in response.iter_content(chunk_size = config.download_chunk_size):
                writer.write(chunk)
                size += len(chunk)
        log.t(f"Media downloaded successfully ({size} bytes)")

    # === Rich media ===

    def upload_news(self, news: News | None) -> UploadResponse:
        if news is None:
            raise ValidationError("News must be provided", MISSING_NEWS)
        log.t(f"Uploading news with {len(news.articles)} articles")
        token = self.__di.access_token_resolver.require_access_token()
        wechat_api = self.__di.wechat_api
        data = wechat_api.post_json(media_upload_news_url(token), news.model_dump(exclude_none = True))
        return wechat_api.decode(data, UploadResponse)

    def upload_video(self, video: Video | None) -> UploadResponse:
        if video is None:
            raise ValidationError("Video must be provided", MISSING_VIDEO)
        log.t(f"Uploading video message for media #{video.media_id}")
        token = self.__di.access_token_resolver.require_access_token()
        wechat_api = self.__di.wechat_api
        data = wechat_api.post_json(media_upload_video_url(token), video.model_dump(exclude_none = True))
        return wechat_api.decode(data, UploadResponse)

    # === Encoding utilities ===

    @staticmethod
    def __write_multipart(body: BinaryIO, filename: str, reader: BinaryIO) -> str:
        boundary = choose_boundary()
        field = RequestField(name = UPLOAD_FORM_FIELD, data = b"", filename = filename)
        field.make_multipart(content_type = guess_content_type(filename))
        body.write(f"--{boundary}\r\n".encode("latin-1"))
        body.write(field.render_headers().encode("utf-8"))
        shutil.copyfileobj(reader, body)
        body.write(f"\r\n--{boundary}--\r\n".encode("latin-1"))
        return f"multipart/form-data; boundary={boundary}"
