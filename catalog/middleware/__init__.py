"""
Catalog API - Middleware Package
================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: Generate correlation ID for logging and tracing
    2. Logging: Log request details with the generated request ID
    3. GZip: Compresses responses over 500 bytes
    4. CORS: Applied by FastAPI's CORSMiddleware (handles preflight)
"""
