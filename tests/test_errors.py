import pytest

from kdesdk.errors import (
    AuthError,
    ErrorCode,
    KDEError,
    VFSError,
    create_error,
    get_error_message,
    is_kde_error,
)


def test_create_error():
    err = create_error(ErrorCode.FILE_NOT_FOUND, "no such file", {"path": "/x"})
    assert isinstance(err, KDEError)
    assert err.code == "FILE_NOT_FOUND"
    assert err.message == "no such file"
    assert err.details == {"path": "/x"}


def test_create_error_rejects_unknown_code():
    with pytest.raises(ValueError):
        create_error("NOPE", "x")


def test_get_error_message():
    assert get_error_message(AuthError("Authentication cookie is missing.")) == (
        "AUTH_ERROR: Authentication cookie is missing."
    )
    assert get_error_message(VFSError("Failed to read file", "Not Found")) == (
        "NETWORK_ERROR: Failed to read file: Not Found"
    )
    assert get_error_message(ValueError("x")) == "Unknown error"
    assert get_error_message(None) == "Unknown error"


def test_is_kde_error():
    assert is_kde_error(create_error(ErrorCode.UNKNOWN_ERROR, "x"))
    assert not is_kde_error({"code": "AUTH_ERROR", "message": "x"})


def test_vfs_error_details():
    err = VFSError("Failed to copy file", "Conflict")
    assert err.details == {"operation": "Failed to copy file"}
    assert isinstance(err, RuntimeError)
