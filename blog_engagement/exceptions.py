"""
Domain errors for django-blog-engagement.

Every error carries the HTTP status the JSON API answers with. Views catch
BlogEngagementError and render {"error": message}.
"""


class BlogEngagementError(Exception):
    """Base class for errors reported back to API callers."""

    status_code = 400
    default_message = "Request could not be processed."

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(BlogEngagementError):
    """A required field is missing or malformed."""

    status_code = 400
    default_message = "Invalid request."

    def __init__(self, message=None, field=None):
        self.field = field
        super().__init__(message)


class Unauthenticated(BlogEngagementError):
    status_code = 401
    default_message = "Access denied!"


class InvalidToken(BlogEngagementError):
    status_code = 403
    default_message = "Access token is invalid"


class AccessDenied(BlogEngagementError):
    status_code = 403
    default_message = "you can not access draft blogs."


class NotFoundError(BlogEngagementError):
    status_code = 404
    default_message = "Not found."


class ConflictError(BlogEngagementError):
    status_code = 409
    default_message = "Resource already exists."
