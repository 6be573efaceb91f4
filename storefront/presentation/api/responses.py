from typing import Optional, TypeVar

from fastapi import Response, status

from ...domain.models import ApiResponse

T = TypeVar("T")


def with_status(
    response: Response,
    result: ApiResponse[T],
    *,
    success_status: int = status.HTTP_200_OK,
    failure_status: int = status.HTTP_400_BAD_REQUEST,
    not_found_error: Optional[str] = None,
) -> ApiResponse[T]:
    """Set the HTTP status implied by a service envelope and hand it back."""
    if result.success:
        response.status_code = success_status
    elif not_found_error is not None and result.error == not_found_error:
        response.status_code = status.HTTP_404_NOT_FOUND
    else:
        response.status_code = failure_status
    return result
