APP_NAME = "REI Finance"
DB_FILE = "rei.db"
DEFAULT_CURRENCY_SYMBOL = "₹"
DATE_FORMAT = "%Y-%m-%d"

# Storage keys, one blob per collection
REMINDERS_KEY = "reminders"
EXPENSES_KEY = "expenses"
BUDGETS_KEY = "budgets"
INTEREST_CALCULATIONS_KEY = "interestCalculations"
TOTAL_AMOUNT_KEY = "totalAmount"

DEFAULT_TOTAL_DESCRIPTION = "Total Balance"
DEFAULT_REMINDER_BODY = "Your reminder is due now."

BUDGET_WARNING_REMAINING_PCT = 20.0
TOP_CATEGORY_LIMIT = 3
RECENT_EXPENSE_LIMIT = 5

DEFAULT_LOG_LEVEL = "INFO"
