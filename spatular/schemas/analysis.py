from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from spatular.schemas.common import BaseResponse
from spatular.schemas.tokenize import TokenizeOptions


class AnalysisDocument(BaseModel):
    text: str
    language: Optional[str] = None  # e.g. "en", "en-th"


class AnalysisRequest(BaseModel):
    documents: List[AnalysisDocument]
    options: TokenizeOptions = Field(default_factory=TokenizeOptions)
    top_terms: int = Field(default=10, ge=1, le=100)
    ngram_size: int = Field(default=2, ge=1, le=10)
    ngram_top_k: int = Field(default=10, ge=1, le=100)
    exclude_numbers: bool = False


class AnalysisData(BaseModel):
    document_count: int
    token_count: int
    language_distribution: Dict[str, float]
    top_terms: List[Dict]
    top_ngrams: List[Dict]
    length_distribution: List[Dict]


class AnalysisResponse(BaseResponse):
    data: AnalysisData
