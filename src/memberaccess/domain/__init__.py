"""memberaccess domain layer."""
