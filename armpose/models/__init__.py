# armpose/models/__init__.py
from .pose import ErrorResponse, StatusResponse
