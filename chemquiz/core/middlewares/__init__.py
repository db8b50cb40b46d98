from .logging import request_logging_middleware

__all__ = ["request_logging_middleware"]
