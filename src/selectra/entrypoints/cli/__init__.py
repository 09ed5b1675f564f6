"""The ``selectra`` command-line interface."""
