"""Media Ingest Package."""

__version__ = "1.0.0"
__description__ = (
    "Media validation and pluggable object storage for user uploads"
)

__all__ = ["storage", "services", "utils"]
