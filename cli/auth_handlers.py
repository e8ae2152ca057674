"""Authentication handlers for CLI: login, logout and password flows"""

import logging
from typing import Optional
from rich.prompt import Prompt

from carwash_auth.validators import password_strength, strength_label, validate_new_password
from utils.formatting import is_valid_email

logger = logging.getLogger(__name__)

STRENGTH_STYLES = {"Weak": "red", "Fair": "yellow", "Good": "cyan", "Strong": "green"}


def login(cli, email: Optional[str] = None) -> bool:
    """Prompt for credentials and sign in"""
    email = email or Prompt.ask("Email", console=cli.console)
    if not is_valid_email(email):
        cli.console.print("[red]✗ Please enter a valid email address[/red]")
        return False
    password = Prompt.ask("Password", password=True, console=cli.console)

    result = cli.run(cli.api.auth.login(email, password))
    name = result.user.name or result.user.email or result.user.id
    cli.console.print(f"[green]✓ Signed in as {name}[/green]")
    return True


def logout(cli) -> bool:
    cli.run(cli.api.auth.logout())
    cli.console.print("[green]✓ Signed out[/green]")
    return True


def forgot_password(cli, email: str) -> bool:
    if not is_valid_email(email):
        cli.console.print("[red]✗ Please enter a valid email address[/red]")
        return False

    cli.run(cli.api.auth.forgot_password(email))
    cli.console.print(f"[green]✓ If an account exists for {email}, a password reset link is on its way.[/green]")
    cli.console.print("[dim]Didn't receive the email? Check your spam folder or try again.[/dim]")
    return True


def prompt_new_password(cli) -> Optional[str]:
    """Ask for a new password twice, showing its strength; None when rejected"""
    password = Prompt.ask("New password", password=True, console=cli.console)
    label = strength_label(password_strength(password))
    cli.console.print(f"Password strength: [{STRENGTH_STYLES[label]}]{label}[/{STRENGTH_STYLES[label]}]")
    confirmation = Prompt.ask("Confirm new password", password=True, console=cli.console)

    problem = validate_new_password(password, confirmation)
    if problem:
        cli.console.print(f"[red]✗ {problem}[/red]")
        return None
    return password


def reset_password(cli, token: str) -> bool:
    password = prompt_new_password(cli)
    if password is None:
        return False

    cli.run(cli.api.auth.reset_password(token, password))
    cli.console.print("[green]✓ Your password has been reset.[/green] You can now sign in with it.")
    return True


def change_password(cli) -> bool:
    current = Prompt.ask("Current password", password=True, console=cli.console)
    password = prompt_new_password(cli)
    if password is None:
        return False

    cli.run(cli.api.auth.change_password(current, password))
    cli.console.print("[green]✓ Password changed[/green]")
    return True
