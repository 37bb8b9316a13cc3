# Firebase loads the functions to deploy from this module

import firebase_admin
from firebase_functions import options

import config

if not firebase_admin._apps:
    firebase_admin.initialize_app()

options.set_global_options(region=config.REGION)

# Import and re-export the callable functions
from callables import send_otp_email, set_admin_role  # noqa: E402

# These exports allow Firebase to find the functions in their expected location
__all__ = ["send_otp_email", "set_admin_role"]
