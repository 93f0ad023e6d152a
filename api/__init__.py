"""Password Breach Check REST API."""
