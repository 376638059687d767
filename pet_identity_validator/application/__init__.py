# pet_identity_validator/application/__init__.py

"""Application layer: matching, scoring and the decision policy"""
