"""
Integration tests for the Startup Idea Validator.

Test components together, with agents replaced by httpx.MockTransport:
- Relay API endpoints (FastAPI TestClient)
- Client -> relay -> agent round trips (httpx.ASGITransport)
"""
