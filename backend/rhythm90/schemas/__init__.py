"""Pydantic request and response models, grouped by resource."""
