"""
Entry point for running windlogger_config as a module.

Usage:
    python -m windlogger_config check /path/to/channels.conf
    python -m windlogger_config show /path/to/sdcard
    python -m windlogger_config export /path/to/channels.conf --output ./channels.csv
    python -m windlogger_config info
"""

from .cli import main

if __name__ == "__main__":
    main()
