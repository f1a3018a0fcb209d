"""envswitch - switch a project's active .env between stored environment files."""

__version__ = "0.1.0"
__author__ = "envswitch contributors"
