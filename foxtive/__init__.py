"""Application building blocks: messages, environments, caches, pagination, enums and cron."""

__version__ = "0.1.0"