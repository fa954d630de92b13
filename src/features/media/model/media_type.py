from enum import Enum


class MediaType(str, Enum):
    """https://developers.weixin.qq.com/doc/offiaccount/Asset_Management/New_temporary_materials.html"""
    image = "image"  # 1MB, JPG
    voice = "voice"  # 2MB, AMR/MP3, up to 60s
    video = "video"  # 10MB, MP4
    thumb = "thumb"  # 64KB, JPG

    @classmethod
    def lookup(cls, value) -> "MediaType | None":
        try:
            return cls(value)
        except ValueError:
            return None
