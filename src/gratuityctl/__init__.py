"""gratuityctl — UAE end-of-service gratuity calculator."""

__version__ = "0.1.0"
