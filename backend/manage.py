#!/usr/bin/env python
"""
Command-line entry point for the spreadsheet upload backend.

Used to run the development server, apply migrations and create the admin
user (``python manage.py createsuperuser``).
"""
import os
import sys


def main() -> None:
    """Run administrative tasks."""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Make sure it is installed (pip install -e .) "
            "and that the virtual environment is activated."
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
