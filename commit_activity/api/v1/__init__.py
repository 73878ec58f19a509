from commit_activity.api.v1 import activity

__all__ = [
    "activity",
]
