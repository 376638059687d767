# pet_identity_validator/core/__init__.py

"""Core domain models and type definitions"""
