from typing import List, Optional
from pydantic import BaseModel, Field

from spatular.schemas.common import BaseResponse


class TokenizeOptions(BaseModel):
    lowercase: bool = True
    remove_stopwords: bool = False
    stemming: bool = False
    # ISO 639 code; defaults to settings.DEFAULT_LANGUAGE
    language: Optional[str] = Field(default=None, pattern=r"^[A-Za-z]{2,3}$")
    custom_stopwords: List[str] = []
    use_dictionary: bool = True  # segment Thai with the service dictionary


class TokenizeRequest(BaseModel):
    text: str
    options: TokenizeOptions = Field(default_factory=TokenizeOptions)


class TokenizeData(BaseModel):
    tokens: List[str]
    count: int


class TokenizeResponse(BaseResponse):
    data: TokenizeData


# Request & Response for /ngrams
class NgramRequest(TokenizeRequest):
    n: int = 2


class NgramData(BaseModel):
    n: int
    ngrams: List[str]
    count: int


class NgramResponse(BaseResponse):
    data: NgramData


# Request & Response for /frequency
class FrequencyRequest(TokenizeRequest):
    top_k: Optional[int] = Field(default=None, ge=1)


class TokenCount(BaseModel):
    token: str
    count: int


class FrequencyData(BaseModel):
    frequencies: List[TokenCount]
    unique_tokens: int
    total_tokens: int


class FrequencyResponse(BaseResponse):
    data: FrequencyData
