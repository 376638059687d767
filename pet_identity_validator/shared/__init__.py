# pet_identity_validator/shared/__init__.py

"""Shared mixins and utilities"""
