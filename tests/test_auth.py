"""Unit tests for GitHub App authentication"""

from unittest.mock import MagicMock

import jwt
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from conftest import make_context
from onboarding_bot.auth import AppAuthenticator
from onboarding_bot.config import Config
from onboarding_bot.exceptions import AuthenticationError


@pytest.fixture(scope="module")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def app_config(env, rsa_key):
    pem = rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption()
    ).decode()
    # Secrets store the key with escaped newlines
    env["PRIVATE_KEY"] = pem.replace("\n", "\\n")
    return Config(env)


class TestAppAuthenticator:
    """Test AppAuthenticator class"""

    def test_create_app_jwt_claims(self, app_config, rsa_key):
        authenticator = AppAuthenticator(app_config)

        token = authenticator.create_app_jwt()
        claims = jwt.decode(token, rsa_key.public_key(), algorithms=["RS256"])

        assert claims["iss"] == "12345"
        assert claims["exp"] - claims["iat"] == 660

    def test_invalid_private_key(self, config):
        authenticator = AppAuthenticator(config)
        with pytest.raises(AuthenticationError, match="Could not sign app JWT"):
            authenticator.create_app_jwt()

    @pytest.mark.asyncio
    async def test_get_installation_client(self, app_config):
        authenticator = AppAuthenticator(app_config)
        mock_session = MagicMock()
        mock_session.post.return_value = make_context(201, {"token": "ghs_installation"})

        client = await authenticator.get_installation_client(mock_session)

        assert client.headers["Authorization"] == "token ghs_installation"
        call_args = mock_session.post.call_args
        assert call_args[0][0] == "https://api.github.com/app/installations/67890/access_tokens"
        assert call_args[1]["headers"]["Authorization"].startswith("Bearer ")

    @pytest.mark.asyncio
    async def test_installation_token_rejected(self, app_config):
        authenticator = AppAuthenticator(app_config)
        mock_session = MagicMock()
        mock_session.post.return_value = make_context(401, {"message": "Bad credentials"})

        with pytest.raises(AuthenticationError, match="Bad credentials"):
            await authenticator.get_installation_client(mock_session)

    @pytest.mark.asyncio
    async def test_response_without_token(self, app_config):
        authenticator = AppAuthenticator(app_config)
        mock_session = MagicMock()
        mock_session.post.return_value = make_context(201, {})

        with pytest.raises(AuthenticationError, match="did not include a token"):
            await authenticator.get_installation_client(mock_session)
