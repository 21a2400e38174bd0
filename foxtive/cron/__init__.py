"""Cron expression parsing and an asyncio scheduler for async and blocking jobs."""