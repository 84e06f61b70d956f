#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""
import os
import sys


def main():
    """Run administrative tasks."""
    set_test_settings_if_needed()
    os.environ.setdefault( 'DJANGO_SETTINGS_MODULE', 'tp.settings.development' )
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    execute_from_command_line( sys.argv )


def set_test_settings_if_needed():
    """
    The test command runs against the CI settings (in-memory database,
    scratch journey directory) unless a settings module was given
    on the command line or in the environment.
    """
    if len( sys.argv ) < 2 or sys.argv[1] != 'test':
        return
    if any( arg.startswith( '--settings' ) for arg in sys.argv[2:] ):
        return
    os.environ.setdefault( 'DJANGO_SETTINGS_MODULE', 'tp.settings.ci' )
    return


if __name__ == '__main__':
    main()
