from typing import Any, Dict

import config
from firebase_functions import https_fn
from otp.send_otp_email import send_otp_email as send_otp_email_handler
from roles.set_admin_role import set_admin_role as set_admin_role_handler


@https_fn.on_call()
def set_admin_role(req: https_fn.CallableRequest) -> Dict[str, Any]:
    """
    Callable that grants the admin role to another user. Admin callers only.

    Args:
        req: The callable request with {"uid": ...} as data

    Returns:
        {"message": ...} confirming the affected UID
    """
    return set_admin_role_handler(req).to_json()


@https_fn.on_call(secrets=[config.SMTP_PASSWORD])
def send_otp_email(req: https_fn.CallableRequest) -> Dict[str, Any]:
    """
    Callable that emails a one-time code through the SMTP relay.

    Args:
        req: The callable request with {"email": ..., "otp": ...} as data

    Returns:
        {"success": True} once the relay accepted the message
    """
    return send_otp_email_handler(req).to_json()
