"""Identity backbone for the review-site backend.

Authenticates users, issues and rotates session credentials, and proves
ownership of an email address before or after account creation.
"""

__version__ = "0.1.0"
