from pydantic import BaseModel, ConfigDict


class ErrorEnvelope(BaseModel):
    """https://developers.weixin.qq.com/doc/offiaccount/Getting_Started/Global_Return_Code.html"""

    model_config = ConfigDict(extra = "ignore")

    errcode: int = 0
    errmsg: str = ""

    @property
    def is_success(self) -> bool:
        return self.errcode == 0
