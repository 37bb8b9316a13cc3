from firebase_admin import auth
from firebase_functions import https_fn
from models.constants import ClaimFields, ErrorMessages, UserTypes
from models.data_models import SetAdminRoleResponse
from models.pydantic_models import SetAdminRoleRequest
from utils.auth_utils import require_admin
from utils.logging_utils import get_logger
from utils.validation_utils import validate_request


def grant_admin_claim(uid: str) -> None:
    """
    Write the admin custom claim to a Firebase Auth user record.

    set_custom_user_claims replaces any claims the user already had.

    Args:
        uid: The UID of the user to promote

    Raises:
        auth.UserNotFoundError: If no user exists for the UID
    """
    auth.set_custom_user_claims(uid, {ClaimFields.USER_TYPE.value: UserTypes.ADMIN.value})


def set_admin_role(request: https_fn.CallableRequest) -> SetAdminRoleResponse:
    """
    Grants the admin role to the user identified in the request payload.

    The payload is validated before the caller is checked, and neither step
    touches Firebase Auth, so rejected calls have no side effect. The claim is
    written once per call; calling again re-asserts the same claim.

    Args:
        request: The callable request containing:
                - data: {"uid": <UID of the user to promote>}
                - auth: The caller's verified auth context

    Returns:
        A SetAdminRoleResponse confirming the affected UID

    Raises:
        invalid-argument: If uid is missing or empty
        unauthenticated: If the caller is not signed in
        permission-denied: If the caller is not an administrator
    """
    logger = get_logger(__name__)
    logger.info("Starting set_admin_role operation")

    role_request = validate_request(
        request.data, SetAdminRoleRequest, ErrorMessages.UID_REQUIRED
    )
    caller_id = require_admin(request)

    logger.info(f"User {caller_id} is granting the admin role to {role_request.uid}")
    grant_admin_claim(role_request.uid)

    logger.info(f"Admin role set for user {role_request.uid}")
    return SetAdminRoleResponse(message=f"✅ Admin role set for UID: {role_request.uid}")
