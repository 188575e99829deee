# armpose/core/errors.py


class PoseStoreError(Exception):
    """The pose store could not be reached or queried."""
