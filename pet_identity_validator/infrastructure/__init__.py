# pet_identity_validator/infrastructure/__init__.py

"""Infrastructure layer: configuration and logging"""
