"""Services — batch jobs that touch the filesystem (results aggregation)."""
