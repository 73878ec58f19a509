"""Weekly commit activity API."""
