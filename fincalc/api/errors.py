"""Turn advisory validation messages into HTTP errors."""

import logging

from fastapi import HTTPException

logger = logging.getLogger(__name__)


def raise_for_errors(calculator: str, errors: list[str]) -> None:
    """422 with ``{"errors": [...]}`` when validation produced any messages."""
    if errors:
        logger.info("Rejected %s request: %s", calculator, "; ".join(errors))
        raise HTTPException(status_code=422, detail={"errors": errors})
