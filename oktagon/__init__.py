"""oktagon - command line administration for Okta organisations."""

__version__ = "0.1.0"
