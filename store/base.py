"""
Record store interface.

Every method that touches user data takes the caller's ``UserContext`` and
only ever reads or writes rows owned by ``ctx.user_id``. Implementations
return normalized ``models`` records.
"""


class BackendNotConfigured(Exception):
    """Raised when a write needs a real backend and only demo data is available."""


class RecordStore:

    def list_income(self, ctx):
        raise NotImplementedError

    def get_income(self, ctx, income_id):
        raise NotImplementedError

    def add_income(self, ctx, entry):
        raise NotImplementedError

    def update_income(self, ctx, entry):
        raise NotImplementedError

    def delete_income(self, ctx, income_id):
        raise NotImplementedError

    def list_expenses(self, ctx):
        raise NotImplementedError

    def get_expense(self, ctx, expense_id):
        raise NotImplementedError

    def add_expense(self, ctx, entry):
        raise NotImplementedError

    def update_expense(self, ctx, entry):
        raise NotImplementedError

    def delete_expense(self, ctx, expense_id):
        raise NotImplementedError

    def list_goals(self, ctx):
        raise NotImplementedError

    def get_goal(self, ctx, goal_id):
        raise NotImplementedError

    def add_goal(self, ctx, goal):
        raise NotImplementedError

    def update_goal(self, ctx, goal):
        raise NotImplementedError

    def delete_goal(self, ctx, goal_id):
        raise NotImplementedError

    def list_reminders(self, ctx):
        raise NotImplementedError

    def get_reminder(self, ctx, reminder_id):
        raise NotImplementedError

    def add_reminder(self, ctx, reminder):
        raise NotImplementedError

    def update_reminder(self, ctx, reminder):
        raise NotImplementedError

    def delete_reminder(self, ctx, reminder_id):
        raise NotImplementedError

    def find_user(self, email):
        raise NotImplementedError

    def create_user(self, name, email, password_hash):
        raise NotImplementedError
