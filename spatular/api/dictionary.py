import logging

from fastapi import APIRouter, Depends

from spatular.messages.dictionary_messages import (
    DICTIONARY_EMPTY_REQUEST,
    DICTIONARY_PATH_NOT_CONFIGURED,
    DICTIONARY_RELOADED,
    DICTIONARY_STATUS,
    DICTIONARY_WORDS_ADDED,
    DICTIONARY_WORDS_REMOVED,
)
from spatular.schemas.dictionary import DictionaryResponse, DictionaryWordsRequest
from spatular.services.tokenization_service import (
    TokenizationService,
    get_tokenization_service,
)
from spatular.utils.exceptions import BadRequestError, NotFoundError
from spatular.utils.response_builder import success_response

router = APIRouter(prefix="/api/dictionary", tags=["Dictionary"])
_OK = {200: {"model": DictionaryResponse}}
logger = logging.getLogger(__name__)


def _require_words(req: DictionaryWordsRequest) -> list[str]:
    words = [w for w in req.words if w.strip()]
    if not words:
        raise BadRequestError(
            code="DICTIONARY_EMPTY_REQUEST", message=DICTIONARY_EMPTY_REQUEST
        )
    return words


@router.get("/", responses=_OK)
def get_dictionary(service: TokenizationService = Depends(get_tokenization_service)):
    return success_response(
        message=DICTIONARY_STATUS,
        data={"size": len(service.dictionary), "source": service.dictionary_path},
    )


@router.post("/words", responses=_OK)
def add_words(
    req: DictionaryWordsRequest,
    service: TokenizationService = Depends(get_tokenization_service),
):
    size = service.add_words(_require_words(req))
    logger.info(f"📖 Dictionary now holds {size} words")
    return success_response(
        message=DICTIONARY_WORDS_ADDED,
        data={"size": size, "source": service.dictionary_path},
    )


@router.delete("/words", responses=_OK)
def remove_words(
    req: DictionaryWordsRequest,
    service: TokenizationService = Depends(get_tokenization_service),
):
    size = service.remove_words(_require_words(req))
    return success_response(
        message=DICTIONARY_WORDS_REMOVED,
        data={"size": size, "source": service.dictionary_path},
    )


@router.post("/reload", responses=_OK)
async def reload_dictionary(
    service: TokenizationService = Depends(get_tokenization_service),
):
    if not service.dictionary_path:
        raise NotFoundError(
            code="DICTIONARY_PATH_NOT_CONFIGURED",
            message=DICTIONARY_PATH_NOT_CONFIGURED,
        )
    # DictionaryLoadError is rendered by spatular_exception_handler
    size = await service.reload_dictionary()
    return success_response(
        message=DICTIONARY_RELOADED,
        data={"size": size, "source": service.dictionary_path},
    )
