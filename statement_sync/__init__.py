"""Bank statement CSV to Notion database import."""
