"""Tech Support Management System: priority queues for support requests and a console to run them."""

__version__ = "0.1.0"
__all__ = ["__version__"]