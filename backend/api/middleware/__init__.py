"""Request middleware and dependencies shared by the routes."""
