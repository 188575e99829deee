# armpose/core/__init__.py
from .errors import PoseStoreError
from .store import PoseStore
