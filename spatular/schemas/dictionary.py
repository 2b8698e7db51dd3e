from typing import List
from pydantic import BaseModel

from spatular.schemas.common import BaseResponse


class DictionaryWordsRequest(BaseModel):
    words: List[str]


class DictionaryData(BaseModel):
    size: int
    source: str | None = None


class DictionaryResponse(BaseResponse):
    data: DictionaryData
