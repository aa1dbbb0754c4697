from models import IncomeEntry, ExpenseEntry, SavingGoal, Reminder
from store.base import RecordStore


class MySQLRecordStore(RecordStore):
    """Record store backed by a mysql-connector connection pool."""

    def __init__(self, pool):
        self.pool = pool

    def _fetch_all(self, sql, params):
        conn = self.pool.get_connection()
        try:
            with conn.cursor(dictionary=True) as cur:
                cur.execute(sql, params)
                return cur.fetchall()
        finally:
            conn.close()

    def _fetch_one(self, sql, params):
        conn = self.pool.get_connection()
        try:
            with conn.cursor(dictionary=True) as cur:
                cur.execute(sql, params)
                return cur.fetchone()
        finally:
            conn.close()

    def _write(self, sql, params):
        conn = self.pool.get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                conn.commit()
                return cur.lastrowid
        finally:
            conn.close()

    # Income

    def list_income(self, ctx):
        rows = self._fetch_all(
            "SELECT id, user_id, source, amount, date, notes, invoice_url, created_at, updated_at "
            "FROM income WHERE user_id=%s ORDER BY created_at DESC",
            (ctx.user_id,)
        )
        return [IncomeEntry.from_row(row) for row in rows]

    def get_income(self, ctx, income_id):
        row = self._fetch_one(
            "SELECT id, user_id, source, amount, date, notes, invoice_url, created_at, updated_at "
            "FROM income WHERE id=%s AND user_id=%s",
            (income_id, ctx.user_id)
        )
        return IncomeEntry.from_row(row) if row else None

    def add_income(self, ctx, entry):
        return self._write(
            "INSERT INTO income (user_id, source, amount, date, notes, invoice_url) "
            "VALUES (%s, %s, %s, %s, %s, %s)",
            (ctx.user_id, entry.source, entry.amount, entry.date, entry.notes, entry.invoice_url)
        )

    def update_income(self, ctx, entry):
        self._write(
            "UPDATE income SET source=%s, amount=%s, date=%s, notes=%s, invoice_url=%s "
            "WHERE id=%s AND user_id=%s",
            (entry.source, entry.amount, entry.date, entry.notes, entry.invoice_url, entry.id, ctx.user_id)
        )

    def delete_income(self, ctx, income_id):
        self._write("DELETE FROM income WHERE id=%s AND user_id=%s", (income_id, ctx.user_id))

    # Expenses

    def list_expenses(self, ctx):
        rows = self._fetch_all(
            "SELECT id, user_id, category, amount, date, notes, receipt_url, created_at, updated_at "
            "FROM expense WHERE user_id=%s ORDER BY created_at DESC",
            (ctx.user_id,)
        )
        return [ExpenseEntry.from_row(row) for row in rows]

    def get_expense(self, ctx, expense_id):
        row = self._fetch_one(
            "SELECT id, user_id, category, amount, date, notes, receipt_url, created_at, updated_at "
            "FROM expense WHERE id=%s AND user_id=%s",
            (expense_id, ctx.user_id)
        )
        return ExpenseEntry.from_row(row) if row else None

    def add_expense(self, ctx, entry):
        return self._write(
            "INSERT INTO expense (user_id, category, amount, date, notes, receipt_url) "
            "VALUES (%s, %s, %s, %s, %s, %s)",
            (ctx.user_id, entry.category, entry.amount, entry.date, entry.notes, entry.receipt_url)
        )

    def update_expense(self, ctx, entry):
        self._write(
            "UPDATE expense SET category=%s, amount=%s, date=%s, notes=%s, receipt_url=%s "
            "WHERE id=%s AND user_id=%s",
            (entry.category, entry.amount, entry.date, entry.notes, entry.receipt_url, entry.id, ctx.user_id)
        )

    def delete_expense(self, ctx, expense_id):
        self._write("DELETE FROM expense WHERE id=%s AND user_id=%s", (expense_id, ctx.user_id))

    # Saving goals

    def list_goals(self, ctx):
        rows = self._fetch_all(
            "SELECT id, user_id, goal_name, category, target_amount, current_amount, notes, created_at, updated_at "
            "FROM saving_goal WHERE user_id=%s ORDER BY created_at DESC",
            (ctx.user_id,)
        )
        return [SavingGoal.from_row(row) for row in rows]

    def get_goal(self, ctx, goal_id):
        row = self._fetch_one(
            "SELECT id, user_id, goal_name, category, target_amount, current_amount, notes, created_at, updated_at "
            "FROM saving_goal WHERE id=%s AND user_id=%s",
            (goal_id, ctx.user_id)
        )
        return SavingGoal.from_row(row) if row else None

    def add_goal(self, ctx, goal):
        return self._write(
            "INSERT INTO saving_goal (user_id, goal_name, category, target_amount, current_amount, notes) "
            "VALUES (%s, %s, %s, %s, %s, %s)",
            (ctx.user_id, goal.goal_name, goal.category, goal.target_amount, goal.current_amount, goal.notes)
        )

    def update_goal(self, ctx, goal):
        self._write(
            "UPDATE saving_goal SET goal_name=%s, category=%s, target_amount=%s, current_amount=%s, notes=%s "
            "WHERE id=%s AND user_id=%s",
            (goal.goal_name, goal.category, goal.target_amount, goal.current_amount, goal.notes,
             goal.id, ctx.user_id)
        )

    def delete_goal(self, ctx, goal_id):
        self._write("DELETE FROM saving_goal WHERE id=%s AND user_id=%s", (goal_id, ctx.user_id))

    # Reminders

    def list_reminders(self, ctx):
        rows = self._fetch_all(
            "SELECT id, user_id, title, due_date, amount, recurring, status, created_at, updated_at "
            "FROM reminder WHERE user_id=%s ORDER BY due_date ASC",
            (ctx.user_id,)
        )
        return [Reminder.from_row(row) for row in rows]

    def get_reminder(self, ctx, reminder_id):
        row = self._fetch_one(
            "SELECT id, user_id, title, due_date, amount, recurring, status, created_at, updated_at "
            "FROM reminder WHERE id=%s AND user_id=%s",
            (reminder_id, ctx.user_id)
        )
        return Reminder.from_row(row) if row else None

    def add_reminder(self, ctx, reminder):
        return self._write(
            "INSERT INTO reminder (user_id, title, due_date, amount, recurring, status) "
            "VALUES (%s, %s, %s, %s, %s, %s)",
            (ctx.user_id, reminder.title, reminder.due_date, reminder.amount,
             reminder.recurring, reminder.status)
        )

    def update_reminder(self, ctx, reminder):
        self._write(
            "UPDATE reminder SET title=%s, due_date=%s, amount=%s, recurring=%s, status=%s "
            "WHERE id=%s AND user_id=%s",
            (reminder.title, reminder.due_date, reminder.amount, reminder.recurring, reminder.status,
             reminder.id, ctx.user_id)
        )

    def delete_reminder(self, ctx, reminder_id):
        self._write("DELETE FROM reminder WHERE id=%s AND user_id=%s", (reminder_id, ctx.user_id))

    # Users

    def find_user(self, email):
        return self._fetch_one(
            "SELECT id, name, email, password_hash FROM users WHERE email=%s", (email,)
        )

    def create_user(self, name, email, password_hash):
        return self._write(
            "INSERT INTO users (name, email, password_hash) VALUES (%s, %s, %s)",
            (name, email, password_hash)
        )
