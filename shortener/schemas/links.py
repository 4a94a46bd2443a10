from pydantic import BaseModel


class LinkCreateRequest(BaseModel):
    # 長度與字元檢查交給store處理，這裡只確認型別
    url: str
    code: str | None = None


class LinkResponse(BaseModel):
    code: str
    url: str
    short_url: str


class HealthResponse(BaseModel):
    status: str
    links: int
