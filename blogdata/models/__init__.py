"""Entity models stored by the repositories."""
