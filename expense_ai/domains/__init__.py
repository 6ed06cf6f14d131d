"""
Domain models for the Expense AI system.

This package contains the core domain models that represent the
business objects and value types in the system.
"""

from expense_ai.domains.enums import *
from expense_ai.domains.errors import *
from expense_ai.domains.expenses import *
from expense_ai.domains.users import *
