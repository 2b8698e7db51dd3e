import logging

from fastapi import APIRouter, Depends

from spatular.core.config import settings
from spatular.messages.tokenize_messages import (
    FREQUENCY_SUCCESS,
    NGRAM_SIZE_INVALID,
    NGRAM_SUCCESS,
    TEXT_TOO_LONG,
    TOKENIZE_SUCCESS,
)
from spatular.schemas.tokenize import (
    FrequencyRequest,
    FrequencyResponse,
    NgramRequest,
    NgramResponse,
    TokenizeRequest,
    TokenizeResponse,
)
from spatular.services.tokenization_service import (
    TokenizationService,
    get_tokenization_service,
)
from spatular.utils.exceptions import BadRequestError
from spatular.utils.response_builder import success_response

router = APIRouter(prefix="/api/tokenize", tags=["Tokenization"])
logger = logging.getLogger(__name__)


def _check_length(text: str) -> None:
    if len(text) > settings.MAX_TEXT_LENGTH:
        raise BadRequestError(code="TEXT_TOO_LONG", message=TEXT_TOO_LONG)


@router.post("/", responses={200: {"model": TokenizeResponse}})
def tokenize(
    req: TokenizeRequest,
    service: TokenizationService = Depends(get_tokenization_service),
):
    _check_length(req.text)
    tokens = service.tokenize(req.text, req.options)
    logger.debug(f"Tokenized {len(req.text)} chars into {len(tokens)} tokens")
    return success_response(
        message=TOKENIZE_SUCCESS,
        data={"tokens": tokens, "count": len(tokens)},
    )


@router.post("/ngrams", responses={200: {"model": NgramResponse}})
def ngrams(
    req: NgramRequest,
    service: TokenizationService = Depends(get_tokenization_service),
):
    _check_length(req.text)
    if not 1 <= req.n <= settings.MAX_NGRAM_SIZE:
        raise BadRequestError(code="NGRAM_SIZE_INVALID", message=NGRAM_SIZE_INVALID)

    grams = service.ngrams(req.text, req.n, req.options)
    return success_response(
        message=NGRAM_SUCCESS,
        data={"n": req.n, "ngrams": grams, "count": len(grams)},
    )


@router.post("/frequency", responses={200: {"model": FrequencyResponse}})
def frequency(
    req: FrequencyRequest,
    service: TokenizationService = Depends(get_tokenization_service),
):
    _check_length(req.text)
    freq = service.frequencies(req.text, req.options)
    shown = service.top_frequencies(freq, req.top_k)
    return success_response(
        message=FREQUENCY_SUCCESS,
        data={
            "frequencies": [{"token": t, "count": c} for t, c in shown],
            "unique_tokens": len(freq),
            "total_tokens": sum(freq.values()),
        },
    )
