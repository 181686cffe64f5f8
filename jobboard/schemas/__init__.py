# Schemas package init
"""
Job Board — API Schemas
========================

Pydantic models defining the request/response contract of the HTTP API.
FastAPI validates request bodies against them and generates the OpenAPI
document from them.
"""
