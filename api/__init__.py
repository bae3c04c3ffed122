"""Password Entropy REST API."""
