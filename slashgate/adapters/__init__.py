"""Web endpoint and ready-made handlers."""
