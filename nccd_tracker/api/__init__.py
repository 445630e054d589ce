"""
FastAPI application exposing the tracker stages over JSON.
"""
