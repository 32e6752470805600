"""Infrastructure layer — SQLite persistence, the registry, and the ownership ledger."""
