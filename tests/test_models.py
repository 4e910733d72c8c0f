from datetime import date, datetime

import pytest

from models.budget import Budget, BudgetAnalysis, BudgetStatus
from models.expense import Expense, ExpenseCategory
from models.interest import CompoundingFrequency, InterestCalculation, InterestType
from models.reminder import Reminder


def expense(amount, category=ExpenseCategory.FOOD, when=datetime(2026, 1, 10, 9, 30), **kw):
    return Expense(title="x", amount=amount, date=when, category=category, **kw)


def jan_budget(amount=500.0, category=None):
    return Budget(
        name="January",
        amount=amount,
        start_date=date(2026, 1, 1),
        end_date=date(2026, 1, 31),
        category=category,
    )


# ── Interest ──────────────────────────────────────────────────────────────────

def test_simple_interest():
    calc = InterestCalculation("loan", 1000, 5, 2, InterestType.SIMPLE)
    assert calc.interest_amount == pytest.approx(100)
    assert calc.total_amount == pytest.approx(1100)


def test_compound_interest_annual():
    calc = InterestCalculation(
        "deposit", 1000, 5, 1, InterestType.COMPOUND, CompoundingFrequency.ANNUALLY
    )
    assert calc.interest_amount == pytest.approx(50)
    assert calc.total_amount == pytest.approx(1050)


def test_compound_interest_monthly_beats_annual():
    monthly = InterestCalculation(
        "m", 1000, 12, 1, InterestType.COMPOUND, CompoundingFrequency.MONTHLY
    )
    assert monthly.interest_amount == pytest.approx(1000 * (1.01 ** 12) - 1000)
    assert monthly.interest_amount > 120


def test_compound_without_frequency_yields_zero():
    calc = InterestCalculation("c", 1000, 5, 1, InterestType.COMPOUND)
    assert calc.interest_amount == 0
    assert calc.total_amount == 1000


def test_periods_per_year():
    assert [f.periods_per_year for f in CompoundingFrequency] == [365, 12, 4, 2, 1]


# ── Expense / reminder ────────────────────────────────────────────────────────

def test_expense_equality_is_by_id():
    a = expense(10)
    b = expense(99, id=a.id)
    assert a == b
    assert a != expense(10)
    assert len({a, b}) == 1


def test_reminder_overdue():
    moment = datetime(2026, 1, 15, 12, 0)
    r = Reminder(title="pay rent", due_date=datetime(2026, 1, 14, 9, 0))
    assert r.is_overdue_at(moment)
    r.is_completed = True
    assert not r.is_overdue_at(moment)
    assert not Reminder(title="later", due_date=datetime(2026, 1, 16)).is_overdue_at(moment)


def test_reminder_overdue_uses_current_time():
    assert Reminder(title="old", due_date=datetime(2000, 1, 1)).is_overdue
    assert not Reminder(title="future", due_date=datetime(2999, 1, 1)).is_overdue


# ── Budget ────────────────────────────────────────────────────────────────────

def test_budget_filters_by_inclusive_date_range_and_category():
    budget = jan_budget(category=ExpenseCategory.FOOD)
    inside_last_day = expense(10, when=datetime(2026, 1, 31, 23, 59))
    inside_first_day = expense(10, when=datetime(2026, 1, 1, 0, 0))
    outside = expense(10, when=datetime(2026, 2, 1, 0, 0))
    other_category = expense(10, category=ExpenseCategory.TRAVEL)
    relevant = budget.relevant_expenses([inside_last_day, inside_first_day, outside, other_category])
    assert relevant == [inside_last_day, inside_first_day]


def test_budget_without_category_takes_all_categories():
    budget = jan_budget()
    items = [expense(10), expense(20, category=ExpenseCategory.TRAVEL)]
    assert budget.total_spent(items) == 30


@pytest.mark.parametrize("spent", [0, 100, 499.5, 500, 501, 5000])
def test_remaining_never_negative(spent):
    assert jan_budget().remaining_amount([expense(spent)]) >= 0


@pytest.mark.parametrize("spent", [0, 125, 250, 500])
def test_percentage_used_matches_spend_under_budget(spent):
    assert jan_budget().percentage_used([expense(spent)]) == pytest.approx(spent / 500 * 100)


def test_overspent_food_budget_saturates():
    budget = jan_budget(category=ExpenseCategory.FOOD)
    analysis = BudgetAnalysis.build(budget, [expense(600)])
    assert analysis.remaining_amount == 0
    assert analysis.percentage_used == 100
    assert analysis.status == BudgetStatus.EXCEEDED
    assert analysis.percentage_spent == pytest.approx(120)
    assert analysis.overspent_amount == pytest.approx(100)
    assert budget.is_exceeded([expense(600)])


def test_zero_budget_percentage_guard():
    assert jan_budget(amount=0).percentage_used([expense(10)]) == 0


def test_status_thresholds():
    budget = jan_budget(amount=100)
    assert BudgetAnalysis.build(budget, [expense(50)]).status == BudgetStatus.GOOD
    assert BudgetAnalysis.build(budget, [expense(80)]).status == BudgetStatus.GOOD
    assert BudgetAnalysis.build(budget, [expense(81)]).status == BudgetStatus.WARNING
    assert BudgetAnalysis.build(budget, [expense(100)]).status == BudgetStatus.EXCEEDED
    assert BudgetStatus.WARNING.description == "Budget Running Low"


def test_spending_by_category_breakdown():
    items = [
        expense(30, ExpenseCategory.TRAVEL),
        expense(50, ExpenseCategory.FOOD),
        expense(10, ExpenseCategory.FOOD),
        expense(20, ExpenseCategory.SHOPPING),
        expense(10, ExpenseCategory.EDUCATION),
    ]
    analysis = BudgetAnalysis.build(jan_budget(), items)
    rows = analysis.spending_by_category
    assert [r.category for r in rows] == [
        ExpenseCategory.FOOD,
        ExpenseCategory.TRAVEL,
        ExpenseCategory.SHOPPING,
        ExpenseCategory.EDUCATION,
    ]
    assert rows[0].amount == 60
    assert rows[0].percentage == pytest.approx(50)
    assert len(analysis.top_spending_categories) == 3
    assert ExpenseCategory.HOUSING not in [r.category for r in rows]


def test_daily_allowance():
    analysis = BudgetAnalysis.build(jan_budget(amount=310), [expense(10)])
    assert analysis.daily_allowance(date(2026, 1, 1)) == pytest.approx(300 / 30)
    # last day and the day the budget ends both divide by at least one day
    assert analysis.daily_allowance(date(2026, 1, 31)) == pytest.approx(300)
    assert analysis.daily_allowance(date(2026, 2, 1)) == 0


def test_daily_allowance_zero_when_exceeded():
    analysis = BudgetAnalysis.build(jan_budget(amount=10), [expense(10)])
    assert analysis.daily_allowance(date(2026, 1, 5)) == 0


def test_every_category_has_a_colour():
    colours = [c.color_hex for c in ExpenseCategory]
    assert len(colours) == 10
    assert all(c.startswith("#") and len(c) == 7 for c in colours)
    assert ExpenseCategory.FOOD.color_hex == "#FF9800"
