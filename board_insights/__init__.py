"""Board Insights - AI-generated insights for project-management boards."""

__version__ = "0.1.0"
