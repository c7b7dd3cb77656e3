"""Static package metadata.

``version`` mirrors ``pyproject.toml``; ``tests/test_metadata_sync.py``
catches drift. The ``LAYEREDCONF_*`` identifiers tell lib_layered_config
where the host and user logging config files live.
"""

from __future__ import annotations

name = "hello_world_plus"
title = "Greeting, bounded sum and string reversal demo with a timestamped console log"
version = "1.0.0"
shell_command = "hello-world-plus"

#: Vendor directory for macOS/Windows configuration paths.
LAYEREDCONF_VENDOR = "wvalverde"
#: Application directory for macOS/Windows configuration paths.
LAYEREDCONF_APP = "Hello World Plus"
#: Slug used for Linux (XDG) configuration paths.
LAYEREDCONF_SLUG = "hello-world-plus"
