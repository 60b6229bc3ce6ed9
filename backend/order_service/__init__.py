"""Order management service for the e-commerce platform."""

__version__ = "1.0.0"
