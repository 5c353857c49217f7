"""
Request logging middleware.
Logs every request on the way in and its status on the way out.
"""

import logging


logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        logger.info("%s > > > %s", request.method, request.get_full_path())
        status_code = 500
        try:
            response = self.get_response(request)
            status_code = response.status_code
            return response
        finally:
            logger.info("%s %s < < < %s", status_code, request.method, request.get_full_path())
