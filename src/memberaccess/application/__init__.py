"""memberaccess application layer."""
