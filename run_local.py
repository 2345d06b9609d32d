#!/usr/bin/env python
"""Start the notice panel on Django's development server."""

import os
import sys

from django.core.management import execute_from_command_line


def main():
    """Serve the API with ``runserver`` and the development settings.

    The ``dismissed_notices`` table must exist, so run
    ``python manage.py migrate`` once beforehand.
    """
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "notice_panel.settings")
    execute_from_command_line([sys.argv[0], "runserver"])


if __name__ == "__main__":
    main()
