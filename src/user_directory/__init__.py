"""User Directory API: login, registration and profile endpoints."""
