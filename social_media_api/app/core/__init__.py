"""Settings, logging, database bootstrap and the error taxonomy."""
