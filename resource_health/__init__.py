"""Lab resource health scoring and alert throttling."""
