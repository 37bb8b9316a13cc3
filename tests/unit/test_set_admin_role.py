import pytest
from firebase_admin import auth
from firebase_functions.https_fn import FunctionsErrorCode, HttpsError

from roles.set_admin_role import set_admin_role


def test_grants_admin_claim_and_confirms_uid(admin_request, set_claims):
    response = set_admin_role(admin_request({"uid": "abc123"}))

    set_claims.assert_called_once_with("abc123", {"usertype": "admin"})
    assert response.to_json() == {"message": "✅ Admin role set for UID: abc123"}


@pytest.mark.parametrize("data", [{}, {"uid": ""}, {"uid": None}, None, "abc123"])
def test_missing_uid_is_invalid_argument(admin_request, set_claims, data):
    with pytest.raises(HttpsError) as exc_info:
        set_admin_role(admin_request(data))

    assert exc_info.value.code == FunctionsErrorCode.INVALID_ARGUMENT
    assert exc_info.value.message == "User ID is required"
    set_claims.assert_not_called()


def test_missing_uid_is_reported_before_authorization(make_request, set_claims):
    with pytest.raises(HttpsError) as exc_info:
        set_admin_role(make_request({}))

    assert exc_info.value.code == FunctionsErrorCode.INVALID_ARGUMENT
    set_claims.assert_not_called()


def test_unauthenticated_caller_is_rejected(make_request, set_claims):
    with pytest.raises(HttpsError) as exc_info:
        set_admin_role(make_request({"uid": "abc123"}))

    assert exc_info.value.code == FunctionsErrorCode.UNAUTHENTICATED
    set_claims.assert_not_called()


@pytest.mark.parametrize("claims", [{}, {"usertype": "customer"}, {"admin": True}])
def test_non_admin_caller_is_rejected(make_request, set_claims, claims):
    request = make_request({"uid": "abc123"}, uid="someone", claims=claims)

    with pytest.raises(HttpsError) as exc_info:
        set_admin_role(request)

    assert exc_info.value.code == FunctionsErrorCode.PERMISSION_DENIED
    set_claims.assert_not_called()


def test_extra_fields_are_ignored(admin_request, set_claims):
    set_admin_role(admin_request({"uid": "abc123", "usertype": "superuser"}))

    set_claims.assert_called_once_with("abc123", {"usertype": "admin"})


def test_identity_provider_failure_propagates(admin_request, set_claims):
    set_claims.side_effect = auth.UserNotFoundError("No user record found")

    with pytest.raises(auth.UserNotFoundError):
        set_admin_role(admin_request({"uid": "missing"}))

    set_claims.assert_called_once_with("missing", {"usertype": "admin"})


def test_repeated_calls_write_the_claim_each_time(admin_request, set_claims):
    set_admin_role(admin_request({"uid": "abc123"}))
    set_admin_role(admin_request({"uid": "abc123"}))

    assert set_claims.call_count == 2
    assert set_claims.call_args_list[0] == set_claims.call_args_list[1]
