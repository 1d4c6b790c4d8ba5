"""
RegimAI mock gateway.

FastAPI application exposing demonstration endpoints for models, agents,
data services, tools and the SkinTwin cognitive integration.
"""
