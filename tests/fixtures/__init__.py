"""
Test fixtures for the Startup Idea Validator.

Contains sample data for testing:
- sample_report.json: A complete agent report with every known section
"""
