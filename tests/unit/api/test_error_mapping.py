import pytest

from src.api.error import ClientError, ServerError, raise_for_error
from src.domain.result import Error, ErrorKind


@pytest.mark.parametrize(
    "kind, status_code",
    [
        (ErrorKind.validation, 400),
        (ErrorKind.unauthenticated, 401),
        (ErrorKind.authz, 403),
        (ErrorKind.not_found, 404),
        (ErrorKind.state_conflict, 400),
    ],
)
def test_client_error_kinds(kind, status_code):
    with pytest.raises(ClientError) as exc_info:
        raise_for_error(Error("CODE", "message", kind))

    assert exc_info.value.status_code == status_code
    assert exc_info.value.base_error.code == "CODE"


def test_dependency_failure_is_server_error():
    with pytest.raises(ServerError):
        raise_for_error(Error("PROFILE_CREATION_FAILED", "Registration failed"))
