"""CLI entry point and argument parsing"""

import argparse
import logging
import sys
from typing import Optional, List
from pydantic import ValidationError
from rich.console import Console

from carwash_api.errors import ApiError
from carwash_api.resources.receipts import RECEIPT_FORMATS
from cli import auth_handlers
from cli.cli_app import CarWashCLI
from cli.receipt_view import show_receipt


logger = logging.getLogger(__name__)
console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="carwash", description="Car wash management client")
    parser.add_argument("--debug", "-d", action="store_true", help="Enable debug logging to carwash_debug.log")
    commands = parser.add_subparsers(dest="command", required=True)

    login_parser = commands.add_parser("login", help="Sign in and store credentials")
    login_parser.add_argument("--email", "-e", default=None, help="Account email (prompted when omitted)")

    commands.add_parser("logout", help="Sign out and forget stored credentials")
    commands.add_parser("status", help="Show stored credential status")
    commands.add_parser("whoami", help="Show the signed-in user")

    forgot_parser = commands.add_parser("forgot-password", help="Email a password reset link")
    forgot_parser.add_argument("email")

    reset_parser = commands.add_parser("reset-password", help="Set a new password using a reset token")
    reset_parser.add_argument("token")

    commands.add_parser("change-password", help="Change the signed-in user's password")

    receipt_parser = commands.add_parser("receipt", help="Show, save or print a job receipt")
    receipt_parser.add_argument("job_id")
    receipt_parser.add_argument("--format", "-f", dest="receipt_format", choices=RECEIPT_FORMATS, default="text")
    receipt_parser.add_argument("--output", "-o", default=None, help="Write the receipt to this file")
    receipt_parser.add_argument("--print", "-p", dest="send_to_printer", action="store_true",
                                help="Send the receipt to the branch printer")

    commands.add_parser("jobs", help="List active jobs")
    return parser


def dispatch(cli: CarWashCLI, args: argparse.Namespace) -> bool:
    if args.command == "login":
        return auth_handlers.login(cli, args.email)
    if args.command == "logout":
        return auth_handlers.logout(cli)
    if args.command == "status":
        cli.display_header()
        cli.display_status()
        return True
    if args.command == "whoami":
        return cli.whoami()
    if args.command == "forgot-password":
        return auth_handlers.forgot_password(cli, args.email)
    if args.command == "reset-password":
        return auth_handlers.reset_password(cli, args.token)
    if args.command == "change-password":
        return auth_handlers.change_password(cli)
    if args.command == "receipt":
        return show_receipt(cli, args.job_id, args.receipt_format, args.output, args.send_to_printer)
    if args.command == "jobs":
        cli.show_active_jobs()
        return True
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI"""
    args = build_parser().parse_args(argv)

    cli = CarWashCLI(debug=args.debug)
    try:
        ok = dispatch(cli, args)
    except ApiError as e:
        # handle_session_expired already told the user what to do
        if not cli.session_expired:
            cli.console.print(f"[red]Error:[/red] {e.message}")
        ok = False
    except ValidationError as e:
        logger.debug(f"Unexpected response shape: {e}")
        cli.console.print("[red]Error:[/red] Unexpected response from the server")
        ok = False
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        ok = False
    finally:
        cli.close()
    return 0 if ok else 1


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
