from typing import Any, Dict, List, Sequence

from fastapi import HTTPException, status

from ecoevents.config import settings


class NotFoundError(Exception):
    """Raised by the CRUD layer when a referenced id does not exist."""

    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} not found.")


class ValidationFailedError(Exception):
    """Input that passed schema validation but is still unacceptable.

    ``errors`` follows FastAPI's request-validation shape so clients get the
    same 422 body whichever layer rejected the input.
    """

    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = errors
        super().__init__("; ".join(e["msg"] for e in errors))

    @classmethod
    def single(cls, loc: Sequence[Any], msg: str, error_type: str = "value_error") -> "ValidationFailedError":
        return cls([{"loc": list(loc), "msg": msg, "type": error_type}])


def not_found_http(exc: NotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


def validation_http(exc: ValidationFailedError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=exc.errors)


def internal_error_http(message: str, exc: Exception) -> HTTPException:
    detail = f"{message} ({exc})" if settings.DEBUG else message
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
