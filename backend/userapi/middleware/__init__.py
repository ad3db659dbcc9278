# Middleware package init
"""
Users API Backend - Middleware Package
=======================================

Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [CORS] → [GZip] → [Request ID] → [Logging] → Route Handler

    1. CORS outermost: answers preflight OPTIONS itself and stamps the
       cross-origin headers on every response that comes back through it
    2. Request ID: generates the correlation ID before anything logs
    3. Logging: records status and duration with the request ID, and turns
       errors no route handled into the 500 envelope, so those responses
       still pass back through CORS

    Only a failure in the middleware chain itself falls through to
    Starlette's ServerErrorMiddleware, which sits outside CORS.
"""
