from .common import DataResponse, ErrorResponse, ORMSchema, PatchSchema

__all__ = ["DataResponse", "ErrorResponse", "ORMSchema", "PatchSchema"]
