"""Core option engine, models and ambient services for ingestkit."""
