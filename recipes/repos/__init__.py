"""Query helpers wrapping the ORM for each entity."""
