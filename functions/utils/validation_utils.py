from typing import Any, Type, TypeVar

from firebase_functions.https_fn import FunctionsErrorCode, HttpsError
from pydantic import BaseModel, ValidationError
from utils.logging_utils import get_logger

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_request(data: Any, model: Type[ModelT], error_message: str) -> ModelT:
    """
    Validate a callable payload against a pydantic model.

    Args:
        data: The raw ``data`` of the callable request
        model: The pydantic model describing the payload
        error_message: Message returned to the caller when validation fails

    Returns:
        The validated model instance

    Raises:
        HttpsError: invalid-argument when the payload is missing or malformed
    """
    logger = get_logger(__name__)

    if not isinstance(data, dict):
        logger.warning(f"Rejected {model.__name__}: payload is not an object")
        raise HttpsError(FunctionsErrorCode.INVALID_ARGUMENT, error_message)

    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Rejected {model.__name__}: {e.error_count()} invalid field(s)")
        raise HttpsError(
            FunctionsErrorCode.INVALID_ARGUMENT,
            error_message,
            details={"errors": [list(err["loc"]) for err in e.errors()]},
        ) from e
