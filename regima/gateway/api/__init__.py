"""Route modules for the gateway, one router per service area."""
