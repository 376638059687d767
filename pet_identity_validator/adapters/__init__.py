# pet_identity_validator/adapters/__init__.py

"""Adapters layer: public API, routing and human-readable diagnostics"""
