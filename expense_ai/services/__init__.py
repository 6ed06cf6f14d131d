"""
Service implementations for the Expense AI system.

These services implement the business logic interfaces defined in
expense_ai.interfaces.services.
"""

from expense_ai.services.insights import *
from expense_ai.services.users import *
