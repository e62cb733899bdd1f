"""Flask service reporting monthly office revenue and unreserved capacity from reservation CSV data."""

__version__ = "1.0.0"