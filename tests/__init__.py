"""
FinTrack Test Suite

This package contains tests for the FinTrack application:

- test_aggregation.py: Monthly series, category breakdown and totals
- test_reports.py: ITR/GST workbooks and xlsx serialization
- test_reminders.py: Reminder transitions and upcoming counts
- test_goals.py: Saving goal progress
- test_models.py: Record normalization at the store boundary
- test_stores.py: MySQL and demo record stores, blob store
- test_auth.py: Signup, login, logout
- test_dashboard.py: Dashboard view-model and overview export
- test_income.py / test_expenses.py: Entry CRUD with attachments
- test_goal_routes.py / test_reminder_routes.py: Goals and reminders endpoints
- test_report_routes.py: ITR/GST preview and download
- test_security.py: CSRF, headers, access control

Run all tests:
    pytest tests/

Run with verbose output:
    pytest tests/ -v
"""
