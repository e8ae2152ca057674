"""Main CLI application class for the car wash client"""

import asyncio
from typing import Any, Awaitable, Optional
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from carwash_api import CarWashApi
from carwash_api.models import parse_job_list
from cli.debug_setup import setup_debug_console
from utils.formatting import format_currency, format_time, format_vehicle_reg, snake_to_title


class CarWashCLI:
    """Terminal front-end over one CarWashApi instance"""

    def __init__(
        self,
        debug: bool = False,
        api: Optional[CarWashApi] = None,
        console: Optional[Console] = None,
    ):
        self.debug = debug
        self.console = console or setup_debug_console(debug)
        self.session_expired = False
        self.api = api or CarWashApi(on_session_expired=self.handle_session_expired)

        self.loop = asyncio.new_event_loop()

    def run(self, coroutine: Awaitable[Any]) -> Any:
        """Run one API coroutine to completion on the CLI's event loop"""
        return self.loop.run_until_complete(coroutine)

    def close(self):
        try:
            self.run(self.api.aclose())
        finally:
            self.loop.close()

    def handle_session_expired(self, login_path: str):
        """Stand-in for the web app's redirect to the login page"""
        self.session_expired = True
        self.console.print(
            "[red]✗ Session expired.[/red] Run [cyan]carwash login[/cyan] to sign in again."
        )

    def display_header(self):
        self.console.print(Panel.fit(
            "[bold cyan]Car Wash Manager[/bold cyan]\n"
            f"[dim]{self.api.client.settings.api_url}[/dim]",
            border_style="cyan"
        ))

    def display_status(self):
        """Show whether credentials are stored and when the access token expires"""
        status = self.api.client.credentials.get_status()

        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column(style="cyan", width=20)
        table.add_column()

        if status["has_tokens"]:
            state = "[green]✓ Signed in[/green]"
            if status["is_expired"]:
                state += " [yellow](access token expired, will refresh on next call)[/yellow]"
            table.add_row("Auth Status:", state)
            table.add_row("Token expires in:", status["time_until_expiry"])
        else:
            table.add_row("Auth Status:", "[red]✗ Not signed in[/red]")
        table.add_row("Token file:", f"[dim]{status['location']}[/dim]")
        table.add_row("API:", f"[dim]{self.api.client.settings.api_url}[/dim]")

        self.console.print(table)

    def whoami(self) -> bool:
        user = self.run(self.api.auth.check_auth())
        if user is None:
            self.console.print("[red]✗ Not signed in[/red]")
            return False

        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column(style="cyan", width=12)
        table.add_column()
        table.add_row("Name:", user.name or "-")
        table.add_row("Email:", user.email or "-")
        table.add_row("Role:", snake_to_title(user.role) if user.role else "-")
        if user.branch_id:
            table.add_row("Branch:", user.branch_id)
        self.console.print(table)
        return True

    def show_active_jobs(self):
        """List the jobs currently checked in, queued or being washed"""
        envelope = self.run(self.api.jobs.active())
        jobs = parse_job_list(envelope)
        if not jobs:
            self.console.print("[dim]No active jobs[/dim]")
            return

        table = Table(title="Active Jobs")
        table.add_column("Job #", style="cyan")
        table.add_column("Vehicle")
        table.add_column("Status")
        table.add_column("Checked in")
        table.add_column("Amount", justify="right")
        for job in jobs:
            table.add_row(
                job.job_number,
                format_vehicle_reg(job.registration) if job.registration else "-",
                snake_to_title(job.status),
                format_time(job.check_in_time) if job.check_in_time else "-",
                format_currency(job.amount),
            )
        self.console.print(table)
