# pet_identity_validator/application/processing/__init__.py

"""Processing components for document-to-pet validation"""
