from .task import Task, U64_MAX

# Export all models for easy importing
__all__ = ["Task", "U64_MAX"]
