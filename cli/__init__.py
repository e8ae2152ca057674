"""CLI package for the car wash client

Command-line access to authentication flows, receipts and the job queue.
"""

from cli.cli_app import CarWashCLI
from cli.main import main

__all__ = [
    "CarWashCLI",
    "main",
]
