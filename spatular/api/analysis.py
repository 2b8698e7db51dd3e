import logging

from fastapi import APIRouter, Depends

from spatular.core.analysis.config import CorpusAnalysisConfig
from spatular.core.config import settings
from spatular.messages.analysis_messages import (
    ANALYSIS_FAILED,
    ANALYSIS_NO_DOCUMENTS,
    ANALYSIS_SUCCESS,
)
from spatular.messages.tokenize_messages import TEXT_TOO_LONG
from spatular.schemas.analysis import AnalysisRequest, AnalysisResponse
from spatular.services.analysis_service import AnalysisService
from spatular.services.tokenization_service import (
    TokenizationService,
    get_tokenization_service,
)
from spatular.utils.exceptions import BadRequestError, ServerError
from spatular.utils.response_builder import success_response

router = APIRouter(prefix="/api/analysis", tags=["Analysis"])
logger = logging.getLogger(__name__)


@router.post("/summary", responses={200: {"model": AnalysisResponse}})
def summarize(
    req: AnalysisRequest,
    service: TokenizationService = Depends(get_tokenization_service),
):
    if not req.documents:
        raise BadRequestError(code="NO_DOCUMENTS", message=ANALYSIS_NO_DOCUMENTS)
    if sum(len(d.text) for d in req.documents) > settings.MAX_TEXT_LENGTH:
        raise BadRequestError(code="TEXT_TOO_LONG", message=TEXT_TOO_LONG)

    config = CorpusAnalysisConfig(
        top_terms=req.top_terms,
        ngram_size=req.ngram_size,
        ngram_top_k=req.ngram_top_k,
        exclude_numbers=req.exclude_numbers,
    )
    try:
        summary = AnalysisService(service).summarize(
            req.documents, req.options, config
        )
    except Exception as e:
        logger.exception(f"❌ Failed to analyze {len(req.documents)} documents: {e}")
        raise ServerError(code="ANALYSIS_FAILED", message=ANALYSIS_FAILED)

    return success_response(message=ANALYSIS_SUCCESS, data=summary)
