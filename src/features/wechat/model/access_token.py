from pydantic import BaseModel, SecretStr


class AccessToken(BaseModel):
    """https://developers.weixin.qq.com/doc/offiaccount/Basic_Information/Get_access_token.html"""
    access_token: SecretStr
    expires_in: int
