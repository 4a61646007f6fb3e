"""tagcache command-line interface."""
