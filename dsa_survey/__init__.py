"""
dsa-survey: question bank and answer collection service for design system awards.

Components:
- core: question bank, actor identity, errors, logging
- storage: JSON document answer store
- services: answer aggregation and generate payloads
- api: FastAPI application and routers
- cli: typer command line
"""

__version__ = "1.0.0"
