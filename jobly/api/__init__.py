"""
FastAPI application exposing health probes and translating domain errors
into the standard error envelope.
"""
