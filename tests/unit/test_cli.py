"""
Tests for the expense-ai command line interface.
"""
import json

import pytest
from unittest.mock import AsyncMock, patch
from typer.testing import CliRunner

from expense_ai.cli import app
from expense_ai.domains.enums import InsightType
from expense_ai.domains.expenses import AIInsight

runner = CliRunner()


@pytest.fixture
def expenses_file(tmp_path):
    path = tmp_path / "expenses.json"
    path.write_text(
        json.dumps(
            [
                {
                    "id": "1",
                    "amount": 42.5,
                    "category": "Food",
                    "description": "Groceries",
                    "date": "2024-03-01",
                }
            ]
        )
    )
    return str(path)


@pytest.fixture
def mock_client():
    with patch("expense_ai.cli.ExpenseAI") as client_cls:
        client = client_cls.return_value
        client.generate_expense_insights = AsyncMock()
        client.categorize_expense = AsyncMock()
        client.generate_ai_answer = AsyncMock()
        yield client_cls


def test_categorize(mock_client):
    mock_client.return_value.categorize_expense.return_value = "Transport"

    result = runner.invoke(app, ["categorize", "Uber to airport"])

    assert result.exit_code == 0
    assert "Category: Transport" in result.output
    mock_client.assert_called_once_with(config={})
    mock_client.return_value.categorize_expense.assert_awaited_once_with(
        "Uber to airport"
    )


def test_categorize_with_config(mock_client, tmp_path):
    config_path = str(tmp_path / "config.json")
    mock_client.return_value.categorize_expense.return_value = "Other"

    result = runner.invoke(app, ["categorize", "Gift", "--config", config_path])

    assert result.exit_code == 0
    mock_client.assert_called_once_with(config_path=config_path)


def test_missing_config_file(mock_client):
    mock_client.side_effect = FileNotFoundError()

    result = runner.invoke(app, ["categorize", "Gift", "--config", "missing.json"])

    assert result.exit_code == 1
    assert "Configuration file not found" in result.output


def test_insights(mock_client, expenses_file):
    mock_client.return_value.generate_expense_insights.return_value = [
        AIInsight(
            id="ai-1-0",
            type=InsightType.WARNING,
            title="Food spend",
            message="High",
            confidence=0.9,
        )
    ]

    result = runner.invoke(app, ["insights", expenses_file])

    assert result.exit_code == 0
    assert "AI Insights" in result.output
    assert "Food spend" in result.output
    assert "90%" in result.output
    expenses = mock_client.return_value.generate_expense_insights.await_args.args[0]
    assert expenses[0].amount == 42.5
    assert expenses[0].description == "Groceries"


def test_insights_missing_expenses_file(mock_client):
    result = runner.invoke(app, ["insights", "nope.json"])

    assert result.exit_code == 1
    assert "Expenses file not found" in result.output


def test_insights_invalid_expenses_file(mock_client, tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"id": "1"}]))

    result = runner.invoke(app, ["insights", str(path)])

    assert result.exit_code == 1
    assert "Invalid expenses file" in result.output


def test_ask(mock_client, expenses_file):
    mock_client.return_value.generate_ai_answer.return_value = "You spent 42.5."

    result = runner.invoke(app, ["ask", "How much on food?", expenses_file])

    assert result.exit_code == 0
    assert "AI: You spent 42.5." in result.output
    question = mock_client.return_value.generate_ai_answer.await_args.args[0]
    assert question == "How much on food?"
