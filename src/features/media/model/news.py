from pydantic import BaseModel


class Article(BaseModel):
    """https://developers.weixin.qq.com/doc/offiaccount/Message_Management/Batch_Sends_and_Originality_Checks.html"""
    thumb_media_id: str
    title: str
    content: str
    author: str | None = None
    content_source_url: str | None = None
    digest: str | None = None
    show_cover_pic: int | None = None


class News(BaseModel):
    articles: list[Article]
