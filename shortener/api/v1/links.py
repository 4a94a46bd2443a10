from fastapi import APIRouter, Depends, HTTPException, status

from shortener.config import settings
from shortener.dependencies.store import get_store
from shortener.schemas.common import APIResponse, ErrorResponse
from shortener.schemas.links import LinkCreateRequest, LinkResponse
from shortener.storage.base import LinkStore
from shortener.storage.exceptions import (
    CodeAlreadyExistsError,
    CodeSpaceExhaustedError,
    InvalidInputError,
    LinkNotFoundError,
)

router = APIRouter(prefix="/links", tags=["links"])


def build_short_url(code: str) -> str:
    """Join BASE_URL and a short code without doubling the slash."""
    return f"{settings.BASE_URL.rstrip('/')}/{code}"


@router.post(
    "",
    response_model=APIResponse[LinkResponse],
    status_code=status.HTTP_200_OK,
    responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
def create_link(
        request: LinkCreateRequest,
        store: LinkStore = Depends(get_store),
):
    """
    Create a short link.

    Stores the URL under the requested code, or under a generated one when
    no code is given.
    """
    try:
        code = store.create(request.url, request.code)
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "success": False,
                "error": "Bad Request",
                "message": str(e),
            },
        )
    except CodeAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "success": False,
                "error": "Bad Request",
                "message": f"Short code '{e.code}' is already in use",
            },
        )
    except CodeSpaceExhaustedError:
        # Caller may retry the whole request
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={
                "success": False,
                "error": "Service Unavailable",
                "message": "Could not allocate a short code, please retry",
            },
        )

    return APIResponse(
        success=True,
        data=LinkResponse(
            code=code,
            url=request.url,
            short_url=build_short_url(code),
        ),
    )


@router.get(
    "/{code}",
    response_model=APIResponse[LinkResponse],
    status_code=status.HTTP_200_OK,
    responses={404: {"model": ErrorResponse}},
)
def get_link(
        code: str,
        store: LinkStore = Depends(get_store),
):
    """Get the long URL behind a short code without redirecting."""
    try:
        url = store.resolve(code)
    except LinkNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "success": False,
                "error": "Not Found",
                "message": "Short link not found",
            },
        )

    return APIResponse(
        success=True,
        data=LinkResponse(code=code, url=url, short_url=build_short_url(code)),
    )
