"""HTTP error helpers shared by the routers."""

import logging
from typing import List

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

OPERATION_FAILED = "Operation failed"


def raise_for_validation_errors(errors: List[str]) -> None:
    """Reject a request with the full ordered list of validation messages."""
    if errors:
        logger.info("Rejected request with %d validation error(s)", len(errors))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=errors)


async def persistence_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Persistence failure on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": OPERATION_FAILED},
    )
