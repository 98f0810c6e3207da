import pytest

from app.utils.security import (
    Identity,
    InvalidToken,
    bearer_token,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)


def test_password_hash_is_verifiable_and_not_plaintext() -> None:
    hashed = hash_password("password123")

    assert hashed != "password123"
    assert verify_password("password123", hashed)
    assert not verify_password("password124", hashed)


def test_decode_token_recovers_identity() -> None:
    token = create_access_token(7, "admin")

    identity = decode_token(token)

    assert identity == Identity(id=7, role="admin")
    assert identity.is_admin


@pytest.mark.parametrize("token", ["", "abc", "a.b.c", create_access_token(1, "user", expires_minutes=-1)])
def test_decode_token_rejects_invalid_tokens(token: str) -> None:
    with pytest.raises(InvalidToken):
        decode_token(token)


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("Bearer abc.def.ghi", "abc.def.ghi"),
        ("bearer abc", "abc"),
        ("Bearer ", None),
        ("Basic dXNlcjpwYXNz", None),
        (None, None),
    ],
)
def test_bearer_token_parses_authorization_header(header, expected) -> None:
    assert bearer_token(header) == expected
