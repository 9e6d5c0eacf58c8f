"""memberaccess infrastructure layer."""
