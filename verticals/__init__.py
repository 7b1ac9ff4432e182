"""Domain verticals; each one ships its own models, services and router."""
