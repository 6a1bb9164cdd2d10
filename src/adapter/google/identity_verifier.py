"""Google ID token implementation of IdentityVerifier."""

import logging

from google.auth import exceptions as google_exceptions
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token

from domain.model.errors import IdentityProviderError, InvalidAssertionError
from domain.model.identity import FederatedIdentity

logger = logging.getLogger(__name__)


class GoogleIdentityVerifier:
    """Verifies Google-issued ID tokens against this application's client id.

    verify_oauth2_token checks the signature against Google's public certs,
    the issuer (accounts.google.com), the expiry and the audience.
    """

    def __init__(self, client_id: str | None):
        self.client_id = client_id
        self._request = google_requests.Request()

    def close(self):
        """Close the HTTP session used to fetch Google certificates."""
        self._request.session.close()

    def verify(self, assertion: str) -> FederatedIdentity:
        if not self.client_id:
            # verify_oauth2_token skips the audience check when audience is None
            raise IdentityProviderError("Google client id is not configured")

        try:
            claims = id_token.verify_oauth2_token(assertion, self._request, audience=self.client_id)
        except google_exceptions.TransportError as e:
            logger.error("Failed to fetch Google certificates", extra={"error": str(e)})
            raise IdentityProviderError("Google certificates unavailable") from e
        except (ValueError, google_exceptions.GoogleAuthError) as e:
            logger.warning("Google ID token rejected", extra={"error": str(e)})
            raise InvalidAssertionError(str(e)) from e

        email = claims.get('email')
        if not email:
            raise InvalidAssertionError("Google ID token carries no email")
        if claims.get('email_verified') is False:
            raise InvalidAssertionError("Google account email is not verified")

        name = claims.get('name') or email.split('@')[0]
        return FederatedIdentity(email=email, name=name)
