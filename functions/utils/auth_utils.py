from firebase_functions import https_fn
from firebase_functions.https_fn import FunctionsErrorCode, HttpsError
from models.constants import ClaimFields, ErrorMessages, UserTypes
from utils.logging_utils import get_logger


def require_admin(request: https_fn.CallableRequest) -> str:
    """
    Ensure the caller of a callable is an authenticated administrator.

    The check relies on the verified ID token the callable runtime attaches
    to the request, so a caller can only pass it if the admin claim was
    written to their account beforehand.

    Args:
        request: The callable request

    Returns:
        The caller's UID

    Raises:
        HttpsError: unauthenticated without an auth context,
                    permission-denied when the caller is not an admin
    """
    logger = get_logger(__name__)

    auth = request.auth
    if auth is None or not auth.uid:
        logger.warning("Rejected privileged call without authentication")
        raise HttpsError(FunctionsErrorCode.UNAUTHENTICATED, ErrorMessages.UNAUTHENTICATED)

    token = auth.token or {}
    if token.get(ClaimFields.USER_TYPE) != UserTypes.ADMIN:
        logger.warning(f"User {auth.uid} is not an administrator")
        raise HttpsError(FunctionsErrorCode.PERMISSION_DENIED, ErrorMessages.ADMIN_REQUIRED)

    return auth.uid
