"""
BookStore Backend: Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: assigns the correlation ID every log line and error body uses
    2. Logging: one access line per request, with status and duration
    3. CORS: FastAPI's CORSMiddleware (handles preflight)

    Responses travel the chain in reverse, so the X-Request-ID header and
    the measured duration are both available when the response leaves.
"""
