# pet_identity_validator/core/types/json.py

"""JSON shapes read from config files and extraction responses"""

# Config files and extraction payloads are always objects at the top level
type JSONPrimitive = str | int | float | bool | None
type JSONDict = dict[str, JSONType]
type JSONList = list[JSONType]
type JSONType = JSONDict | JSONList | JSONPrimitive

__all__ = ["JSONDict", "JSONList", "JSONPrimitive", "JSONType"]
