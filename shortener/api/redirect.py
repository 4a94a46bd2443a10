"""
Top-level endpoints.

GET /{code} is the short URL itself: it answers with a temporary redirect
to the stored long URL. The health check lives here as well because it is
mounted outside the /api/v1 prefix.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import RedirectResponse

from shortener.dependencies.store import get_store
from shortener.schemas.common import APIResponse
from shortener.schemas.links import HealthResponse
from shortener.storage.base import LinkStore
from shortener.storage.exceptions import LinkNotFoundError

router = APIRouter(tags=["redirect"])


@router.get(
    "/health",
    response_model=APIResponse[HealthResponse],
    status_code=status.HTTP_200_OK,
)
def health_check(store: LinkStore = Depends(get_store)):
    return APIResponse(
        success=True,
        data=HealthResponse(status="ok", links=len(store)),
    )


@router.get("/{code}", status_code=status.HTTP_307_TEMPORARY_REDIRECT)
def redirect_to_url(
        code: str,
        store: LinkStore = Depends(get_store),
):
    """
    Redirect a short code to its long URL.

    307 keeps the request method on redirect and is not cached permanently by
    browsers. The stored URL is not validated, but RedirectResponse
    percent-quotes characters outside its safe set (e.g. space becomes %20)
    when building the Location header.
    """
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

    return RedirectResponse(url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
