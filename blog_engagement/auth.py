"""
Bearer-token identity for the JSON API.

Tokens are signed with Django's signing framework and carry only the user's
primary key. Issuing them (signup, login, federated login) is up to the
project; this module only turns an Authorization header back into a user.
"""
import logging

from django.contrib.auth import get_user_model
from django.core import signing

from .conf import blog_settings
from .exceptions import InvalidToken, Unauthenticated

logger = logging.getLogger(__name__)


def issue_access_token(user):
    """Return a signed access token for user."""
    return signing.dumps({"id": user.pk}, salt=blog_settings.TOKEN_SALT)


def resolve_bearer_token(header):
    """
    Return the user identified by an "Authorization: Bearer <token>" header.

    Raises Unauthenticated when no token is present and InvalidToken when
    the token does not verify or names no active user.
    """
    parts = (header or "").split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise Unauthenticated()

    try:
        payload = signing.loads(
            parts[1],
            salt=blog_settings.TOKEN_SALT,
            max_age=blog_settings.TOKEN_MAX_AGE,
        )
    except signing.BadSignature:
        logger.warning("Rejected access token with bad signature")
        raise InvalidToken()

    User = get_user_model()
    try:
        user = User.objects.get(pk=payload.get("id"), is_active=True)
    except (User.DoesNotExist, ValueError, TypeError, AttributeError):
        logger.warning("Rejected access token for unknown user")
        raise InvalidToken()
    return user


class BearerTokenRequiredMixin:
    """
    Require a valid bearer token on a JsonApiView.

    The view calls authenticate() before its handler runs, inside its error
    handling, so a missing or bad token becomes a JSON error response.
    """

    def authenticate(self, request):
        request.user = resolve_bearer_token(request.headers.get("Authorization"))
