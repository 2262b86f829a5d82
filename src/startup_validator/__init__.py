"""
Startup Idea Validator.

Relays startup-idea submissions to a hosted AI evaluation agent and turns the
agent's reply into a structured, multi-section report:
- Quick verdict (overall score, YC fit, key strength, major risk)
- Detailed evaluation per dimension
- Competitive landscape
- Actionable insights and a YC-ready pitch

Architecture: FastAPI relay service + async httpx client with retry,
response classification and report normalization
"""

__version__ = "0.1.0"
