"""
Project-level middleware for Shopfront
"""

import logging

from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger('shopfront.errors')


class ExceptionLoggingMiddleware(MiddlewareMixin):
    """
    Last-resort handler for exceptions no view caught.

    Logs the failing request and returns None, so Django still builds its
    regular 500 response.
    """

    def process_exception(self, request, exception):
        logger.error(
            'Unhandled error on %s %s: %s',
            request.method,
            request.path,
            exception,
            exc_info=(type(exception), exception, exception.__traceback__),
        )
        return None
