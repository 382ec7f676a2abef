"""HTTP middleware: request ID.

Applied in main app; import and use from catechesis.main.
"""

from catechesis.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
