import pytest

from carhire.models import Identity
from carhire.service.verify_token import DummyVerifier, TokenVerificationError


@pytest.fixture
def dummy_verifier():
    return DummyVerifier()


class TestDummyVerifier:

    @pytest.mark.parametrize(('token', 'passes'), [
        ("abcd", True),
        ("04", True),
        (1234, False),
        (None, False),
        ("xp123", False),
        ("abc", False),
        ("", False)
    ])
    def test_verify(self, dummy_verifier, token, passes: bool):
        try:
            dummy_verifier.verify_token(token)
            assert passes
        except TokenVerificationError:
            assert not passes

    def test_verify_gives_identity(self, dummy_verifier):
        assert dummy_verifier.verify_token("0a0b") == Identity(b"\x0a\x0b")
