"""Resolution of HTTP basic-auth credentials sent with notifications."""

import os
from collections.abc import Mapping

from adyen_webhook.core.base_models import HttpCredentials

AUTHORIZATION_ENVIRON_KEY = "HTTP_AUTHORIZATION"


def resolve_credentials(
    http_credentials: HttpCredentials | None = None,
    authorization: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> HttpCredentials | None:
    """
    Pick the credentials submitted with a notification request.

    Lookup order:
    1. Credentials supplied directly, when both fields are present
    2. The raw ``Authorization`` header value
    3. ``HTTP_AUTHORIZATION`` from a CGI/WSGI-style environ (``os.environ``
       when not given)

    Transport layers serving concurrent requests should pass credentials or
    the header explicitly; the environ fallback is read at call time.
    """
    if http_credentials is not None and http_credentials.is_complete:
        return http_credentials

    if authorization is None:
        environ = os.environ if environ is None else environ
        authorization = environ.get(AUTHORIZATION_ENVIRON_KEY)

    decoded = HttpCredentials.from_authorization_header(authorization)
    if decoded is not None:
        return decoded
    return http_credentials
