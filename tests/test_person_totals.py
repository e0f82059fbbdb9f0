"""Tests for the per-owner monthly aggregator."""

from datetime import date
from decimal import Decimal

from shared_ledger.engine import calculate_person_monthly_totals
from shared_ledger.models.transaction import Category, ExpenseType, MonthKey, Owner


MARCH = MonthKey(year=2025, month=2)


class TestPersonMonthlyTotals:
    """Tests for calculate_person_monthly_totals."""

    def test_type_totals(self, march_2025_transactions):
        """Test that each type is summed for the owner only."""
        lorenzo = calculate_person_monthly_totals(march_2025_transactions, Owner.LORENZO, MARCH)
        assert lorenzo.owner is Owner.LORENZO
        assert lorenzo.month_key == MARCH
        assert lorenzo.income == Decimal("6000")
        assert lorenzo.household_paid == Decimal("1000")
        assert lorenzo.personal == Decimal("80")
        assert lorenzo.settlement == Decimal("100")
        assert lorenzo.split_5050_paid == Decimal("0")
        assert lorenzo.credit == Decimal("0")

    def test_fair_portions(self, march_2025_transactions):
        """Test 50/50 and income-proportional portions."""
        lorenzo = calculate_person_monthly_totals(march_2025_transactions, Owner.LORENZO, MARCH)
        maria = calculate_person_monthly_totals(march_2025_transactions, Owner.MARIA, MARCH)
        assert lorenzo.split_5050_portion == Decimal("100")
        assert maria.split_5050_portion == Decimal("100")
        assert lorenzo.household_portion == Decimal("600")
        assert maria.household_portion == Decimal("400")

    def test_debt_formula(self, march_2025_transactions):
        """Test debt = should pay - actually paid - settlement."""
        lorenzo = calculate_person_monthly_totals(march_2025_transactions, Owner.LORENZO, MARCH)
        maria = calculate_person_monthly_totals(march_2025_transactions, Owner.MARIA, MARCH)
        # Lorenzo: (100 + 600 + 50) - (0 + 1000 + 0) - 100
        assert lorenzo.debt == Decimal("-350")
        # Maria: (100 + 400 + 0) - (200 + 0 + 50) - 0
        assert maria.debt == Decimal("250")

    def test_debts_are_not_forced_symmetric(self, march_2025_transactions):
        """Test that a one-sided settlement leaves the debts asymmetric."""
        lorenzo = calculate_person_monthly_totals(march_2025_transactions, Owner.LORENZO, MARCH)
        maria = calculate_person_monthly_totals(march_2025_transactions, Owner.MARIA, MARCH)
        assert lorenzo.debt != -maria.debt

    def test_total_excludes_income_credit_and_settlement(self, march_2025_transactions):
        """Test that total only counts spend."""
        lorenzo = calculate_person_monthly_totals(march_2025_transactions, Owner.LORENZO, MARCH)
        maria = calculate_person_monthly_totals(march_2025_transactions, Owner.MARIA, MARCH)
        assert lorenzo.total == Decimal("1080")
        assert maria.total == Decimal("250")

    def test_split_5050_scenario(self, make_transaction):
        """Test Lorenzo paying a 50 split expense alone."""
        month = [make_transaction(Owner.LORENZO, "50", ExpenseType.SPLIT_5050)]
        lorenzo = calculate_person_monthly_totals(month, Owner.LORENZO, MARCH)
        maria = calculate_person_monthly_totals(month, Owner.MARIA, MARCH)
        assert lorenzo.split_5050_portion == Decimal("25")
        assert maria.split_5050_portion == Decimal("25")
        assert lorenzo.debt == Decimal("-25")
        assert maria.debt == Decimal("25")

    def test_household_scenario(self, make_transaction):
        """Test a 100 household expense with a 60/40 income split."""
        month = [
            make_transaction(Owner.LORENZO, "600", ExpenseType.INCOME),
            make_transaction(Owner.MARIA, "400", ExpenseType.INCOME),
            make_transaction(Owner.LORENZO, "100", ExpenseType.HOUSEHOLD),
        ]
        lorenzo = calculate_person_monthly_totals(month, Owner.LORENZO, MARCH)
        maria = calculate_person_monthly_totals(month, Owner.MARIA, MARCH)
        assert lorenzo.share_percent == Decimal("0.6")
        assert lorenzo.household_portion == Decimal("60")
        assert maria.household_portion == Decimal("40")
        assert lorenzo.debt == Decimal("-40")
        assert maria.debt == Decimal("40")

    def test_paid_for_partner_moves_debt(self, make_transaction):
        """Test that paying for the partner creates a debt for the partner."""
        month = [make_transaction(Owner.MARIA, "70", ExpenseType.PAID_FOR_PARTNER)]
        lorenzo = calculate_person_monthly_totals(month, Owner.LORENZO, MARCH)
        maria = calculate_person_monthly_totals(month, Owner.MARIA, MARCH)
        assert lorenzo.debt == Decimal("70")
        assert maria.debt == Decimal("-70")
        assert maria.paid_for_partner == Decimal("70")
        assert maria.total == Decimal("70")

    def test_settlement_has_no_floor(self, make_transaction):
        """Test that over-settling drives debt negative."""
        month = [
            make_transaction(Owner.MARIA, "70", ExpenseType.PAID_FOR_PARTNER),
            make_transaction(Owner.LORENZO, "500", ExpenseType.SETTLEMENT),
        ]
        lorenzo = calculate_person_monthly_totals(month, Owner.LORENZO, MARCH)
        assert lorenzo.debt == Decimal("-430")

    def test_owner_without_transactions(self, make_transaction):
        """Test all-zero totals and a share depending on the partner's income."""
        month = [make_transaction(Owner.MARIA, "3000", ExpenseType.INCOME)]
        lorenzo = calculate_person_monthly_totals(month, Owner.LORENZO, MARCH)
        assert lorenzo.income == 0
        assert lorenzo.total == 0
        assert lorenzo.debt == 0
        assert lorenzo.share_percent == 0

        empty = calculate_person_monthly_totals([], Owner.LORENZO, MARCH)
        assert empty.share_percent == Decimal("0.5")
        assert empty.debt == 0

    def test_category_totals(self, make_transaction):
        """Test per-category sums for the owner's spend."""
        month = [
            make_transaction(Owner.LORENZO, "100", ExpenseType.SPLIT_5050, category=Category.GROCERIES),
            make_transaction(Owner.LORENZO, "40", ExpenseType.PERSONAL, category=Category.GROCERIES),
            make_transaction(Owner.LORENZO, "25", ExpenseType.HOUSEHOLD, category=Category.ELECTRICITY),
            make_transaction(Owner.LORENZO, "999", ExpenseType.PERSONAL),
            make_transaction(Owner.MARIA, "60", ExpenseType.SPLIT_5050, category=Category.GROCERIES),
        ]
        lorenzo = calculate_person_monthly_totals(month, Owner.LORENZO, MARCH)
        assert lorenzo.category_totals == {
            Category.GROCERIES: Decimal("140"),
            Category.ELECTRICITY: Decimal("25"),
        }

    def test_categories_do_not_change_debt(self, make_transaction):
        """Test that category is orthogonal to the debt math."""
        plain = [make_transaction(Owner.LORENZO, "80", ExpenseType.SPLIT_5050)]
        tagged = [make_transaction(Owner.LORENZO, "80", ExpenseType.SPLIT_5050, category=Category.DINING)]
        a = calculate_person_monthly_totals(plain, Owner.LORENZO, MARCH)
        b = calculate_person_monthly_totals(tagged, Owner.LORENZO, MARCH)
        assert a.debt == b.debt
        assert a.total == b.total

    def test_categories_can_be_skipped(self, make_transaction):
        """Test that category_totals is None when not requested."""
        month = [make_transaction(category=Category.HEALTH)]
        totals = calculate_person_monthly_totals(
            month, Owner.LORENZO, MARCH, include_categories=False
        )
        assert totals.category_totals is None

    def test_every_categorized_type_is_counted(self, make_transaction):
        """Test that categorized income, credit and settlement are summed too."""
        month = [
            make_transaction(Owner.LORENZO, "5000", ExpenseType.INCOME, category=Category.HOME),
            make_transaction(Owner.LORENZO, "40", ExpenseType.CREDIT, category=Category.HEALTH),
            make_transaction(Owner.LORENZO, "15", ExpenseType.SETTLEMENT, category=Category.HOME),
        ]
        totals = calculate_person_monthly_totals(month, Owner.LORENZO, MARCH)
        assert totals.category_totals == {
            Category.HOME: Decimal("5015"),
            Category.HEALTH: Decimal("40"),
        }

    def test_zero_and_negative_amounts_are_accepted(self, make_transaction):
        """Test that the engine does not validate amounts."""
        month = [
            make_transaction(Owner.LORENZO, "0", ExpenseType.PERSONAL),
            make_transaction(Owner.LORENZO, "-20", ExpenseType.PERSONAL),
        ]
        totals = calculate_person_monthly_totals(month, Owner.LORENZO, MARCH)
        assert totals.personal == Decimal("-20")
