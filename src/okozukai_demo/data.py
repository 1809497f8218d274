"""Demo data definitions: one USD journal, eight tags, six months of activity.

All data is fictional and used for demonstration purposes only.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

DEMO_JOURNAL_NAME = "Personal Budget"
DEMO_JOURNAL_CURRENCY = "USD"


@dataclass(frozen=True)
class TagDef:
    """Definition for a demo tag."""

    name: str
    color: str


@dataclass(frozen=True)
class TransactionDef:
    """Definition for a demo transaction (always booked at 12:00 UTC)."""

    type: str
    amount: Decimal
    year: int
    month: int
    day: int
    note: Optional[str]
    tags: tuple[str, ...] = ()

    @property
    def occurred_at(self) -> datetime:
        return datetime(self.year, self.month, self.day, 12, 0, tzinfo=timezone.utc)


FOOD = "Food & Dining"
TRANSPORT = "Transport"
ENTERTAINMENT = "Entertainment"
UTILITIES = "Utilities"
SHOPPING = "Shopping"
HEALTH = "Health"
EDUCATION = "Education"
GROCERIES = "Groceries"

DEMO_TAGS: list[TagDef] = [
    TagDef(FOOD, "#ef4444"),
    TagDef(TRANSPORT, "#f59e0b"),
    TagDef(ENTERTAINMENT, "#8b5cf6"),
    TagDef(UTILITIES, "#06b6d4"),
    TagDef(SHOPPING, "#ec4899"),
    TagDef(HEALTH, "#10b981"),
    TagDef(EDUCATION, "#6366f1"),
    TagDef(GROCERIES, "#84cc16"),
]


def _in(amount: str, y: int, m: int, d: int, note: str) -> TransactionDef:
    return TransactionDef("In", Decimal(amount), y, m, d, note)


def _out(amount: str, y: int, m: int, d: int, note: str, *tags: str) -> TransactionDef:
    return TransactionDef("Out", Decimal(amount), y, m, d, note, tags)


DEMO_TRANSACTIONS: list[TransactionDef] = [
    # Sep 2025
    _in("4200", 2025, 9, 1, "Salary"),
    _out("1350", 2025, 9, 2, "Rent", UTILITIES),
    _out("85.50", 2025, 9, 4, "Weekly groceries", GROCERIES),
    _out("42", 2025, 9, 6, "Sushi dinner", FOOD),
    _out("55", 2025, 9, 8, "Monthly transit pass", TRANSPORT),
    _out("12.99", 2025, 9, 10, "Netflix subscription", ENTERTAINMENT),
    _out("92", 2025, 9, 11, "Groceries - Costco", GROCERIES),
    _out("35", 2025, 9, 14, "New running shoes", SHOPPING, HEALTH),
    _out("28", 2025, 9, 18, "Thai takeout", FOOD),
    _out("120", 2025, 9, 20, "Electric bill", UTILITIES),
    _out("15", 2025, 9, 22, "Uber ride", TRANSPORT),
    _in("150", 2025, 9, 25, "Freelance side gig"),
    _out("65", 2025, 9, 27, "Birthday gift for friend", SHOPPING),
    # Oct 2025
    _in("4200", 2025, 10, 1, "Salary"),
    _out("1350", 2025, 10, 2, "Rent", UTILITIES),
    _out("78", 2025, 10, 3, "Weekly groceries", GROCERIES),
    _out("55", 2025, 10, 5, "Monthly transit pass", TRANSPORT),
    _out("38", 2025, 10, 7, "Ramen night out", FOOD),
    _out("250", 2025, 10, 9, "Online Python course", EDUCATION),
    _out("12.99", 2025, 10, 10, "Netflix subscription", ENTERTAINMENT),
    _out("45", 2025, 10, 12, "Concert tickets", ENTERTAINMENT),
    _out("95", 2025, 10, 14, "Groceries - Trader Joe's", GROCERIES),
    _out("22", 2025, 10, 16, "Coffee beans & supplies", FOOD),
    _out("110", 2025, 10, 18, "Electric bill", UTILITIES),
    _out("30", 2025, 10, 20, "Flu medication", HEALTH),
    _out("18", 2025, 10, 24, "Uber ride", TRANSPORT),
    _in("200", 2025, 10, 28, "Sold old textbooks"),
    _out("75", 2025, 10, 30, "Halloween costume & decor", SHOPPING, ENTERTAINMENT),
    # Nov 2025
    _in("4200", 2025, 11, 1, "Salary"),
    _out("1350", 2025, 11, 2, "Rent", UTILITIES),
    _out("82", 2025, 11, 3, "Weekly groceries", GROCERIES),
    _out("55", 2025, 11, 5, "Monthly transit pass", TRANSPORT),
    _out("12.99", 2025, 11, 10, "Netflix subscription", ENTERTAINMENT),
    _out("65", 2025, 11, 11, "Italian dinner date", FOOD),
    _out("340", 2025, 11, 14, "Black Friday laptop deal", SHOPPING),
    _out("88", 2025, 11, 16, "Groceries - Whole Foods", GROCERIES),
    _out("105", 2025, 11, 18, "Electric bill", UTILITIES),
    _out("50", 2025, 11, 20, "Annual flu shot", HEALTH),
    _out("32", 2025, 11, 22, "Uber rides (3)", TRANSPORT),
    _out("25", 2025, 11, 24, "Streaming services", ENTERTAINMENT),
    _in("500", 2025, 11, 26, "Thanksgiving bonus"),
    _out("180", 2025, 11, 28, "Thanksgiving dinner supplies", FOOD, GROCERIES),
    # Dec 2025
    _in("4200", 2025, 12, 1, "Salary"),
    _in("800", 2025, 12, 15, "Year-end bonus"),
    _out("1350", 2025, 12, 2, "Rent", UTILITIES),
    _out("90", 2025, 12, 3, "Weekly groceries", GROCERIES),
    _out("55", 2025, 12, 5, "Monthly transit pass", TRANSPORT),
    _out("12.99", 2025, 12, 10, "Netflix subscription", ENTERTAINMENT),
    _out("420", 2025, 12, 12, "Christmas gifts", SHOPPING),
    _out("58", 2025, 12, 14, "Holiday party dinner", FOOD, ENTERTAINMENT),
    _out("115", 2025, 12, 16, "Groceries for holiday baking", GROCERIES),
    _out("125", 2025, 12, 18, "Electric bill (winter)", UTILITIES),
    _out("40", 2025, 12, 20, "Dentist co-pay", HEALTH),
    _out("22", 2025, 12, 22, "Uber to airport", TRANSPORT),
    _out("35", 2025, 12, 28, "New Year's party supplies", ENTERTAINMENT, FOOD),
    # Jan 2026
    _in("4500", 2026, 1, 1, "Salary (raise!)"),
    _out("1350", 2026, 1, 2, "Rent", UTILITIES),
    _out("75", 2026, 1, 4, "Weekly groceries", GROCERIES),
    _out("55", 2026, 1, 5, "Monthly transit pass", TRANSPORT),
    _out("150", 2026, 1, 8, "Gym annual membership", HEALTH),
    _out("12.99", 2026, 1, 10, "Netflix subscription", ENTERTAINMENT),
    _out("88", 2026, 1, 12, "Groceries - Costco", GROCERIES),
    _out("42", 2026, 1, 14, "Korean BBQ dinner", FOOD),
    _out("300", 2026, 1, 16, "Online UX design course", EDUCATION),
    _out("115", 2026, 1, 18, "Electric bill", UTILITIES),
    _out("28", 2026, 1, 20, "Pharmacy", HEALTH),
    _out("95", 2026, 1, 22, "Winter jacket on sale", SHOPPING),
    _out("18", 2026, 1, 25, "Uber ride", TRANSPORT),
    _in("250", 2026, 1, 28, "Freelance design work"),
    # Feb 2026
    _in("4500", 2026, 2, 1, "Salary"),
    _out("1350", 2026, 2, 2, "Rent", UTILITIES),
    _out("80", 2026, 2, 3, "Weekly groceries", GROCERIES),
    _out("55", 2026, 2, 5, "Monthly transit pass", TRANSPORT),
    _out("85", 2026, 2, 8, "Valentine's dinner", FOOD, ENTERTAINMENT),
    _out("45", 2026, 2, 10, "Valentine's gift", SHOPPING),
    _out("12.99", 2026, 2, 10, "Netflix subscription", ENTERTAINMENT),
    _out("92", 2026, 2, 13, "Groceries - Trader Joe's", GROCERIES),
    _out("110", 2026, 2, 16, "Electric bill", UTILITIES),
    _out("35", 2026, 2, 18, "Brunch with friends", FOOD),
    _out("20", 2026, 2, 20, "Book - Clean Architecture", EDUCATION),
    _out("25", 2026, 2, 22, "Uber rides", TRANSPORT),
]
