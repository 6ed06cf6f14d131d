from typing import List, Optional
import typer
import asyncio
import json
import logging
from typing_extensions import Annotated
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.table import Table

from expense_ai.client.expense_ai import ExpenseAI
from expense_ai.domains.expenses import ExpenseRecord

# --- Basic Logging Configuration ---
logging.basicConfig(level=logging.WARNING, format="%(levelname)s:%(name)s:%(message)s")
# --- End Logging Configuration ---

app = typer.Typer()
console = Console()

INSIGHT_STYLES = {
    "warning": "yellow",
    "info": "blue",
    "success": "green",
    "tip": "magenta",
}


def _load_client(config: Optional[str]) -> ExpenseAI:
    """Build the client from a config file, or from the environment when none is given."""
    try:
        if config:
            return ExpenseAI(config_path=config)
        return ExpenseAI(config={})
    except FileNotFoundError:
        console.print(
            f"[bold red]Error:[/bold red] Configuration file not found at '{config}'"
        )
        raise typer.Exit(code=1)
    except ValueError as e:
        console.print(f"[bold red]Error loading configuration:[/bold red] {e}")
        raise typer.Exit(code=1)


def _load_expenses(path: str) -> List[ExpenseRecord]:
    try:
        with open(path, "r") as f:
            data = json.load(f)
        return TypeAdapter(List[ExpenseRecord]).validate_python(data)
    except FileNotFoundError:
        console.print(f"[bold red]Error:[/bold red] Expenses file not found at '{path}'")
        raise typer.Exit(code=1)
    except (json.JSONDecodeError, ValidationError) as e:
        console.print(f"[bold red]Invalid expenses file:[/bold red] {e}")
        raise typer.Exit(code=1)


ConfigOption = Annotated[
    Optional[str],
    typer.Option(help="Path to the configuration file (JSON or Python)."),
]


@app.command()
def insights(
    expenses_file: Annotated[str, typer.Argument(help="JSON array of expenses.")],
    config: ConfigOption = None,
):
    """Generate financial insights for a list of expenses."""
    client = _load_client(config)
    expenses = _load_expenses(expenses_file)

    with console.status("[bold green]Analyzing expenses...", spinner="dots"):
        results = asyncio.run(client.generate_expense_insights(expenses))

    table = Table(title="AI Insights")
    table.add_column("Type")
    table.add_column("Title", style="bold")
    table.add_column("Message")
    table.add_column("Action")
    table.add_column("Confidence", justify="right")
    for insight in results:
        style = INSIGHT_STYLES.get(insight.type.value, "white")
        table.add_row(
            f"[{style}]{insight.type.value}[/{style}]",
            insight.title,
            insight.message,
            insight.action or "",
            f"{insight.confidence:.0%}",
        )
    console.print(table)


@app.command()
def categorize(
    description: Annotated[str, typer.Argument(help="Expense description.")],
    config: ConfigOption = None,
):
    """Categorize a single expense description."""
    client = _load_client(config)
    category = asyncio.run(client.categorize_expense(description))
    console.print(f"[bright_blue]Category:[/bright_blue] {category}")


@app.command()
def ask(
    question: Annotated[str, typer.Argument(help="Question about your spending.")],
    expenses_file: Annotated[str, typer.Argument(help="JSON array of expenses.")],
    config: ConfigOption = None,
):
    """Ask a question about a list of expenses."""
    client = _load_client(config)
    expenses = _load_expenses(expenses_file)

    with console.status("[bold green]Thinking...", spinner="dots"):
        answer = asyncio.run(client.generate_ai_answer(question, expenses))
    console.print(f"[bright_blue]AI:[/bright_blue] {answer}")


if __name__ == "__main__":
    app()
