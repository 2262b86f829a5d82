"""
Unit tests for the Startup Idea Validator.

Test individual components in isolation:
- Data models (form validation, report sections, score banding)
- Response classifier and user-facing error messages
- Retry policy (backoff, retryable vs. non-retryable failures)
- Agent client, response extractors, prompt builder
- Result normalizer (structured vs. opaque fallback)
- Submission orchestrator and session state machine
"""
