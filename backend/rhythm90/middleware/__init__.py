# Middleware package init
"""
Rhythm90 Backend — Middleware Package
======================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID first: every later log line can read the correlation ID
    2. Logging: measures the full handler duration and final status
"""
