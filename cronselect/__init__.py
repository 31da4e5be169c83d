"""cronselect - pick cron field values and reconcile them with cron-like notation."""

__version__ = "0.1.0"
