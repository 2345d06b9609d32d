"""Gunicorn entry point for the notice panel.

Used as the container command; ``run_local.py`` is the development
counterpart.
"""

import sys

from gunicorn.app.wsgiapp import run


def main():
    """Serve ``notice_panel.wsgi`` on port 8000.

    Dismiss and render requests are short database or cache round trips, so
    two workers with two threads each and a 30 second timeout are enough.
    Access and error logs go to stdout/stderr.
    """
    sys.argv = [
        "gunicorn",
        "notice_panel.wsgi:application",
        "--bind",
        "0.0.0.0:8000",
        "--workers",
        "2",
        "--threads",
        "2",
        "--timeout",
        "30",
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]
    run()


if __name__ == "__main__":
    main()
