# Middleware package init
"""
Postboard Backend — Middleware Package
========================================

Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID first: every log line of the request carries the same id
    2. Logging: records method, path, status and duration
    3. CORS: FastAPI's CORSMiddleware (handles preflight)

Request validation and authentication are not middleware here: they are
per-route FastAPI dependencies (see app.routes.posts).
"""
